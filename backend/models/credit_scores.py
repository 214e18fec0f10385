"""Credit score report models for the mock bureau score engine."""

from datetime import date, datetime
from typing import List

from pydantic import Field

from .base import CamelCaseModel
from .enums import CreditGrade, FactorImpact, FactorWeight


MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 900


class CreditFactorModel(CamelCaseModel):
    """One explainable contributor to a borrower's score."""

    factor: str = Field(..., min_length=1)
    impact: FactorImpact
    description: str
    weight: FactorWeight


class ScoreHistoryEntryModel(CamelCaseModel):
    """Monthly score snapshot."""

    snapshot_date: date = Field(..., alias="date")
    score: int = Field(..., ge=MIN_CREDIT_SCORE, le=MAX_CREDIT_SCORE)
    change: int = Field(default=0)
    reason: str


class CibilScoreReportModel(CamelCaseModel):
    """Synthetic score, grade, factors and history for a borrower."""

    id: str = Field(..., min_length=1)
    borrower_id: str
    score: int = Field(..., ge=MIN_CREDIT_SCORE, le=MAX_CREDIT_SCORE)
    grade: CreditGrade
    factors: List[CreditFactorModel] = Field(default_factory=list)
    history: List[ScoreHistoryEntryModel] = Field(default_factory=list)
    generated_at: datetime
    valid_until: datetime
    report_type: str = Field(default="Full Report")
    provider: str = Field(default="Mock CIBIL Service")
