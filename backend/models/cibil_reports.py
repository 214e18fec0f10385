"""Credit bureau report models for synthetic CIBIL records and summaries."""

from datetime import datetime
import logging
from typing import Optional

from pydantic import Field, model_validator

from .base import CamelCaseModel, Money
from .enums import ReportStatus


logger = logging.getLogger(__name__)


class LoanReferenceModel(CamelCaseModel):
    """Opaque loan identifier wrapper attached to a report."""

    id: str = Field(..., min_length=1)


class CibilReportModel(CamelCaseModel):
    """One synthetic adverse-credit-event entry for a borrower."""

    id: str = Field(..., min_length=1)
    loan_reference: LoanReferenceModel
    borrower_id: str
    block_number: int = Field(..., ge=1, le=4)
    amount_reported: Money = Field(..., ge=0)
    reported_at: datetime
    status: ReportStatus
    resolved_at: Optional[datetime] = Field(default=None)
    cibil_reference_id: str = Field(..., min_length=1)
    reason: str
    description: str

    @model_validator(mode="after")
    def _validate_resolution(self) -> "CibilReportModel":
        """Keep `resolved_at` consistent with the report status."""
        is_resolved = self.status == ReportStatus.RESOLVED
        if is_resolved and self.resolved_at is None:
            logger.warning("Resolved report id=%s is missing resolved_at", self.id)
            raise ValueError("resolved_at is required when status is RESOLVED")
        if not is_resolved and self.resolved_at is not None:
            logger.warning("Report id=%s with status=%s carries resolved_at", self.id, self.status.value)
            raise ValueError("resolved_at is only allowed when status is RESOLVED")
        if self.resolved_at is not None and self.resolved_at < self.reported_at:
            raise ValueError("resolved_at must not precede reported_at")
        return self


class CibilReportSummaryModel(CamelCaseModel):
    """Aggregated counts and latest report date for a borrower's report set."""

    total_reports: int = Field(default=0, ge=0)
    active_reports: int = Field(default=0, ge=0)
    resolved_reports: int = Field(default=0, ge=0)
    last_report_date: Optional[datetime] = Field(default=None)
