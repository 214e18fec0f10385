"""Unit tests for YAML settings loading."""

from pathlib import Path
import sys
import tempfile
import unittest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
BACKEND_ROOT = PROJECT_ROOT / "backend"
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from core.config import AppSettings, load_settings


class SettingsLoaderTests(unittest.TestCase):
    """Validate config parsing and default fallbacks."""

    def setUp(self) -> None:
        """Create a scratch directory for config files."""
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)

    def tearDown(self) -> None:
        """Remove scratch config files."""
        self._tmp.cleanup()

    def _write(self, text: str) -> Path:
        path = self.tmp_dir / "config.yml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_repository_config_loads(self) -> None:
        """The shipped config file parses into settings."""
        settings = load_settings()
        self.assertIsInstance(settings, AppSettings)
        self.assertEqual(settings.port, 8000)
        self.assertIn("http://localhost:3000", settings.cors_allowed_origins)

    def test_missing_file_uses_defaults(self) -> None:
        """A missing file yields default settings."""
        settings = load_settings(self.tmp_dir / "absent.yml")
        self.assertEqual(settings, AppSettings())

    def test_values_are_coerced(self) -> None:
        """Strings are coerced and invalid numbers fall back to defaults."""
        path = self._write(
            "app:\n"
            "  name: Demo\n"
            "  debug: 'yes'\n"
            "  port: not-a-port\n"
            "  environment: staging\n"
            "  log_level: debug\n"
            "cors:\n"
            "  allowed_origins: http://a.test, http://b.test\n"
        )
        settings = load_settings(path)
        self.assertEqual(settings.app_name, "Demo")
        self.assertTrue(settings.debug)
        self.assertEqual(settings.port, 8000)
        self.assertEqual(settings.environment, "staging")
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.cors_allowed_origins, ["http://a.test", "http://b.test"])

    def test_non_mapping_file_uses_defaults(self) -> None:
        """A YAML scalar document is ignored."""
        self.assertEqual(load_settings(self._write("just text\n")), AppSettings())


if __name__ == "__main__":
    unittest.main()
