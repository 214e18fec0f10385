"""Configuration loading utilities for YAML-based application settings."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .logging_config import get_logger


logger = get_logger(__name__)
_BASE_DIR = Path(__file__).resolve().parent.parent
_CONFIG_PATH = _BASE_DIR / "config.yml"

_DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@dataclass(frozen=True)
class AppSettings:
    """Application settings loaded from YAML configuration file."""

    app_name: str = "PaySafe Mock CIBIL API"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    environment: str = "development"
    log_level: str = "INFO"
    cors_allowed_origins: list[str] = field(default_factory=lambda: list(_DEFAULT_CORS_ORIGINS))


def _to_bool(value: Any, default: bool = False) -> bool:
    """Convert value to bool with a default fallback."""
    try:
        if isinstance(value, bool):
            return value
        return value.strip().lower() in {"1", "true", "yes", "on"}
    except (AttributeError, ValueError):
        logger.warning("Invalid boolean value '%s'. Using default=%s", value, default)
        return default


def _to_int(value: Any, default: int) -> int:
    """Convert value to int with a default fallback."""
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid integer value '%s'. Using default=%s", value, default)
        return default


def _to_list(value: Any, default: Optional[list[str]] = None) -> list[str]:
    """Convert list-like or comma-separated value to list[str]."""
    if value is None:
        return list(default or [])
    if isinstance(value, list):
        return [str(item).strip() for item in value if str(item).strip()]
    return [item.strip() for item in str(value).split(",") if item.strip()]


def _read_config(path: Optional[Union[str, Path]] = None) -> dict:
    """Read and parse YAML configuration."""
    config_path = Path(path) if path is not None else _CONFIG_PATH
    try:
        with config_path.open("r", encoding="utf-8") as config_file:
            config_data = yaml.safe_load(config_file) or {}
        if not isinstance(config_data, dict):
            logger.warning("Config file %s does not hold a mapping. Falling back to defaults.", config_path)
            return {}
        logger.info("Configuration loaded from %s", config_path)
        return config_data
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Falling back to defaults.", config_path)
        return {}
    except yaml.YAMLError:
        logger.exception("Failed to parse config file %s", config_path)
        return {}


def load_settings(path: Optional[Union[str, Path]] = None) -> AppSettings:
    """Load and validate application settings from `config.yml`."""
    config = _read_config(path)
    app_cfg = config.get("app") or {}
    cors_cfg = config.get("cors") or {}

    return AppSettings(
        app_name=str(app_cfg.get("name", "PaySafe Mock CIBIL API")),
        debug=_to_bool(app_cfg.get("debug", False), False),
        host=str(app_cfg.get("host", "127.0.0.1")),
        port=_to_int(app_cfg.get("port", 8000), 8000),
        environment=str(app_cfg.get("environment", "development")),
        log_level=str(app_cfg.get("log_level", "INFO")).upper(),
        cors_allowed_origins=_to_list(cors_cfg.get("allowed_origins"), default=_DEFAULT_CORS_ORIGINS),
    )
