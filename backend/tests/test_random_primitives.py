"""Unit tests for random field generators used by synthetic reports."""

from collections import Counter
from datetime import datetime, timedelta, timezone
from pathlib import Path
import re
import sys
import unittest

import numpy as np
import pandas as pd


PROJECT_ROOT = Path(__file__).resolve().parents[2]
BACKEND_ROOT = PROJECT_ROOT / "backend"
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from common import random_primitives
from models.enums import ReportStatus


class RandomPrimitiveTests(unittest.TestCase):
    """Validate ranges, formats and weighting of random primitives."""

    def setUp(self) -> None:
        """Seed a generator so failures are reproducible."""
        self.rng = np.random.default_rng(20240601)
        self.now = datetime(2026, 3, 31, 12, 0, tzinfo=timezone.utc)

    def test_past_date_stays_within_window(self) -> None:
        """Dates fall strictly before now and at most 6 months + 29 days back."""
        earliest = (pd.Timestamp(self.now) - pd.DateOffset(months=6) - pd.Timedelta(days=29)).to_pydatetime()
        for _ in range(2000):
            value = random_primitives.past_date(self.rng, now=self.now)
            self.assertLess(value, self.now)
            self.assertGreaterEqual(value, earliest)

    def test_past_date_is_at_least_one_month_back(self) -> None:
        """The month offset never drops below one."""
        latest = (pd.Timestamp(self.now) - pd.DateOffset(months=1)).to_pydatetime()
        for _ in range(500):
            self.assertLessEqual(random_primitives.past_date(self.rng, now=self.now), latest)

    def test_past_date_honours_custom_month_window(self) -> None:
        """A one-month window only varies by the extra day offset."""
        earliest = (pd.Timestamp(self.now) - pd.DateOffset(months=1) - pd.Timedelta(days=29)).to_pydatetime()
        for _ in range(200):
            value = random_primitives.past_date(self.rng, max_months_ago=1, now=self.now)
            self.assertGreaterEqual(value, earliest)

    def test_past_date_defaults_to_wall_clock(self) -> None:
        """Without an explicit reference time the result precedes the current time."""
        self.assertLess(random_primitives.past_date(self.rng), datetime.now(timezone.utc))

    def test_resolution_date_within_thirty_days(self) -> None:
        """Resolution offsets stay inside [0, 30) days."""
        for _ in range(1000):
            resolved = random_primitives.resolution_date(self.rng, self.now)
            self.assertGreaterEqual(resolved, self.now)
            self.assertLessEqual(resolved, self.now + timedelta(days=30))

    def test_synthetic_id_format(self) -> None:
        """Loan ids have three lowercase base-36 segments."""
        pattern = re.compile(r"^[0-9a-z]{8}-[0-9a-z]{4}-[0-9a-z]{4}$")
        for _ in range(200):
            self.assertRegex(random_primitives.synthetic_id(self.rng), pattern)

    def test_reference_code_format(self) -> None:
        """Reference codes carry the bureau prefix and uppercase body."""
        pattern = re.compile(r"^CIBIL-[0-9A-Z]{8}$")
        for _ in range(200):
            self.assertRegex(random_primitives.reference_code(self.rng), pattern)

    def test_amount_default_range_inclusive(self) -> None:
        """Amounts stay in [1000, 50000]."""
        values = [random_primitives.amount(self.rng) for _ in range(5000)]
        self.assertGreaterEqual(min(values), 1000)
        self.assertLessEqual(max(values), 50000)
        self.assertTrue(all(isinstance(value, int) for value in values))

    def test_amount_custom_bounds_hit_both_ends(self) -> None:
        """Both endpoints of a narrow range are reachable."""
        values = {random_primitives.amount(self.rng, minimum=5, maximum=7) for _ in range(300)}
        self.assertEqual(values, {5, 6, 7})

    def test_amount_accepts_swapped_bounds(self) -> None:
        """Reversed bounds are treated as the same range."""
        value = random_primitives.amount(self.rng, minimum=20, maximum=10)
        self.assertTrue(10 <= value <= 20)

    def test_block_number_covers_one_to_four(self) -> None:
        """Block numbers cover exactly 1..4."""
        values = {random_primitives.block_number(self.rng) for _ in range(500)}
        self.assertEqual(values, {1, 2, 3, 4})

    def test_status_distribution_matches_weights(self) -> None:
        """Status draws approximate a 60/30/10 split."""
        trials = 10000
        counts = Counter(random_primitives.status(self.rng) for _ in range(trials))
        self.assertAlmostEqual(counts[ReportStatus.REPORTED] / trials, 0.6, delta=0.03)
        self.assertAlmostEqual(counts[ReportStatus.RESOLVED] / trials, 0.3, delta=0.03)
        self.assertAlmostEqual(counts[ReportStatus.PENDING] / trials, 0.1, delta=0.03)


class StatusThresholdTests(unittest.TestCase):
    """Check the threshold structure with a scripted uniform draw."""

    class _FixedDraw:
        """Stand-in generator returning a fixed uniform value."""

        def __init__(self, value: float) -> None:
            self.value = value

        def random(self) -> float:
            return self.value

    def test_threshold_boundaries(self) -> None:
        """Values below 0.6, below 0.9 and above map to the three statuses."""
        cases = [
            (0.0, ReportStatus.REPORTED),
            (0.5999, ReportStatus.REPORTED),
            (0.6, ReportStatus.RESOLVED),
            (0.8999, ReportStatus.RESOLVED),
            (0.9, ReportStatus.PENDING),
            (0.9999, ReportStatus.PENDING),
        ]
        for draw, expected in cases:
            with self.subTest(draw=draw):
                self.assertEqual(random_primitives.status(self._FixedDraw(draw)), expected)


if __name__ == "__main__":
    unittest.main()
