"""Synthetic CIBIL report generation and aggregation.

Reports are never stored: each call draws a fresh record set for the borrower
from the random source and the wall clock.
"""

from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime
import logging
from threading import RLock
from typing import ContextManager, List, Optional, Sequence

import numpy as np
import pandas as pd

from common import random_primitives
from models.cibil_reports import CibilReportModel, CibilReportSummaryModel, LoanReferenceModel
from models.enums import ReportStatus


logger = logging.getLogger(__name__)

ALWAYS_HAS_HISTORY_BORROWER_ID = "user_001"
ALWAYS_HAS_HISTORY_MIN_REPORTS = 2
MAX_REPORTS_PER_BORROWER = 5

REPORT_ID_PREFIX = "report"
REPORT_ID_BORROWER_CHARS = 4
REPORT_REASON = "Missed minimum payment"
REPORT_DESCRIPTION = "Failed to make required payment by block end date"

CSV_COLUMNS = [
    "id",
    "loanId",
    "borrowerId",
    "blockNumber",
    "amountReported",
    "reportedAt",
    "status",
    "resolvedAt",
    "cibilReferenceId",
    "reason",
    "description",
]


def build_report_id(borrower_id: str, index: int) -> str:
    """Return the per-call report id, e.g. ``report-user-3``."""
    return "{0}-{1}-{2}".format(REPORT_ID_PREFIX, borrower_id[:REPORT_ID_BORROWER_CHARS], index)


def generate_report(
    rng: np.random.Generator,
    index: int,
    borrower_id: str,
    now: Optional[datetime] = None,
) -> CibilReportModel:
    """Build one synthetic report for `borrower_id` at sequence position `index`."""
    reported_at = random_primitives.past_date(rng, now=now)
    report_status = random_primitives.status(rng)
    resolved_at = None
    if report_status == ReportStatus.RESOLVED:
        resolved_at = random_primitives.resolution_date(rng, reported_at)

    return CibilReportModel(
        id=build_report_id(borrower_id, index),
        loan_reference=LoanReferenceModel(id=random_primitives.synthetic_id(rng)),
        borrower_id=borrower_id,
        block_number=random_primitives.block_number(rng),
        amount_reported=random_primitives.amount(rng),
        reported_at=reported_at,
        status=report_status,
        resolved_at=resolved_at,
        cibil_reference_id=random_primitives.reference_code(rng),
        reason=REPORT_REASON,
        description=REPORT_DESCRIPTION,
    )


def report_count_for_borrower(rng: np.random.Generator, borrower_id: str) -> int:
    """Draw how many reports a borrower gets, applying the demo history floor."""
    candidate = int(rng.integers(0, MAX_REPORTS_PER_BORROWER, endpoint=True))
    if borrower_id == ALWAYS_HAS_HISTORY_BORROWER_ID:
        return max(candidate, ALWAYS_HAS_HISTORY_MIN_REPORTS)
    return candidate


def generate_reports_for_borrower(
    rng: np.random.Generator,
    borrower_id: str,
    now: Optional[datetime] = None,
) -> List[CibilReportModel]:
    """Generate a borrower's report set ordered newest first."""
    count = report_count_for_borrower(rng, borrower_id)
    reports = [generate_report(rng, index, borrower_id, now=now) for index in range(count)]
    reports.sort(key=lambda report: report.reported_at, reverse=True)
    logger.debug("Generated %d synthetic CIBIL reports for borrower_id=%s", len(reports), borrower_id)
    return reports


def summarize_reports(reports: Sequence[CibilReportModel]) -> CibilReportSummaryModel:
    """Reduce a newest-first report set to summary counts.

    `last_report_date` is read from the first element, so callers must pass
    reports already sorted by `reported_at` descending.
    """
    return CibilReportSummaryModel(
        total_reports=len(reports),
        active_reports=sum(1 for report in reports if report.status == ReportStatus.REPORTED),
        resolved_reports=sum(1 for report in reports if report.status == ReportStatus.RESOLVED),
        last_report_date=reports[0].reported_at if reports else None,
    )


def reports_to_frame(reports: Sequence[CibilReportModel]) -> pd.DataFrame:
    """Flatten reports into a tabular frame with camelCase columns."""
    rows = []
    for report in reports:
        payload = report.to_payload()
        payload["loanId"] = payload.pop("loanReference")["id"]
        rows.append(payload)
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


class CibilReportService:
    """Entry points used by the HTTP layer to fetch mock bureau data."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        """Initialize service with an optional shared random generator.

        Without a generator each call uses its own freshly seeded one, so
        concurrent requests share no random state.
        """
        self._rng = rng
        self._lock = RLock()

    def _guard(self) -> ContextManager:
        # numpy generators are not thread-safe; only a shared one needs the lock.
        return self._lock if self._rng is not None else nullcontext()

    def get_reports(self, borrower_id: str, now: Optional[datetime] = None) -> List[CibilReportModel]:
        """Return a freshly synthesized, newest-first report list."""
        with self._guard():
            rng = self._rng if self._rng is not None else np.random.default_rng()
            return generate_reports_for_borrower(rng, borrower_id, now=now)

    def get_summary(self, borrower_id: str, now: Optional[datetime] = None) -> CibilReportSummaryModel:
        """Return summary counts for an independently synthesized report set."""
        return summarize_reports(self.get_reports(borrower_id, now=now))

    def export_reports_csv(self, borrower_id: str, now: Optional[datetime] = None) -> str:
        """Render a fresh report set as CSV text."""
        frame = reports_to_frame(self.get_reports(borrower_id, now=now))
        logger.info("Exported %d CIBIL reports as CSV for borrower_id=%s", len(frame), borrower_id)
        return frame.to_csv(index=False)
