"""Random field generators shared by synthetic CIBIL report construction.

Every helper draws from an explicit ``numpy.random.Generator`` so callers can
seed them for reproducible output. None of them raise for in-range inputs.
"""

from __future__ import annotations

from datetime import datetime, timedelta
import logging
from typing import Optional

import numpy as np
import pandas as pd

from models.base import utc_now
from models.enums import ReportStatus


logger = logging.getLogger(__name__)

DEFAULT_MAX_MONTHS_AGO = 6
MAX_EXTRA_DAYS_AGO = 29
MAX_RESOLUTION_DAYS = 30

DEFAULT_MIN_AMOUNT = 1000
DEFAULT_MAX_AMOUNT = 50000

MIN_BLOCK_NUMBER = 1
MAX_BLOCK_NUMBER = 4

REPORTED_THRESHOLD = 0.6
RESOLVED_THRESHOLD = 0.9

REFERENCE_PREFIX = "CIBIL-"
_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_LOAN_ID_SEGMENT_LENGTHS = (8, 4, 4)
_REFERENCE_SEGMENT_LENGTH = 8


def _base36_segment(rng: np.random.Generator, length: int) -> str:
    """Draw `length` lowercase base-36 characters."""
    indices = rng.integers(0, len(_BASE36_ALPHABET), size=length)
    return "".join(_BASE36_ALPHABET[int(idx)] for idx in indices)


def past_date(
    rng: np.random.Generator,
    max_months_ago: int = DEFAULT_MAX_MONTHS_AGO,
    now: Optional[datetime] = None,
) -> datetime:
    """Return a timestamp 1..max_months_ago calendar months plus 0..29 days before `now`."""
    reference = now if now is not None else utc_now()
    months_ago = int(rng.integers(1, max(1, max_months_ago), endpoint=True))
    days_ago = int(rng.integers(0, MAX_EXTRA_DAYS_AGO, endpoint=True))
    shifted = pd.Timestamp(reference) - pd.DateOffset(months=months_ago) - pd.Timedelta(days=days_ago)
    return shifted.to_pydatetime()


def resolution_date(rng: np.random.Generator, reported_at: datetime) -> datetime:
    """Return `reported_at` shifted forward by a uniform 0-30 day offset."""
    return reported_at + timedelta(days=MAX_RESOLUTION_DAYS * float(rng.random()))


def synthetic_id(rng: np.random.Generator) -> str:
    """Build a loan-style id from three random base-36 segments.

    Uniqueness is not guaranteed; collisions are accepted for demo data.
    """
    return "-".join(_base36_segment(rng, length) for length in _LOAN_ID_SEGMENT_LENGTHS)


def reference_code(rng: np.random.Generator) -> str:
    """Build a bureau reference such as ``CIBIL-4K7Q2ZP1``."""
    return REFERENCE_PREFIX + _base36_segment(rng, _REFERENCE_SEGMENT_LENGTH).upper()


def amount(
    rng: np.random.Generator,
    minimum: int = DEFAULT_MIN_AMOUNT,
    maximum: int = DEFAULT_MAX_AMOUNT,
) -> int:
    """Return a uniform integer amount in [minimum, maximum] inclusive."""
    low, high = sorted((int(minimum), int(maximum)))
    return int(rng.integers(low, high, endpoint=True))


def status(rng: np.random.Generator) -> ReportStatus:
    """Sample a report status with the fixed 60/30/10 weighting."""
    draw = float(rng.random())
    if draw < REPORTED_THRESHOLD:
        return ReportStatus.REPORTED
    if draw < RESOLVED_THRESHOLD:
        return ReportStatus.RESOLVED
    return ReportStatus.PENDING


def block_number(rng: np.random.Generator) -> int:
    """Return a synthetic ledger block marker in [1, 4]."""
    return int(rng.integers(MIN_BLOCK_NUMBER, MAX_BLOCK_NUMBER, endpoint=True))
