"""Public model package exports for the mock CIBIL backend."""

from .base import CamelCaseModel, Money, utc_now
from .cibil_reports import CibilReportModel, CibilReportSummaryModel, LoanReferenceModel
from .credit_scores import (
    MAX_CREDIT_SCORE,
    MIN_CREDIT_SCORE,
    CibilScoreReportModel,
    CreditFactorModel,
    ScoreHistoryEntryModel,
)
from .enums import CreditGrade, FactorImpact, FactorWeight, KycStatus, ReportStatus, StringEnum
from .exceptions import AuthenticationError, ModelError, ModelNotFoundError, ModelValidationError
from .users import DemoUserModel, DemoUserPublicModel, LoginRequestModel, LoginResultModel

__all__ = [
    "CamelCaseModel",
    "Money",
    "utc_now",
    "LoanReferenceModel",
    "CibilReportModel",
    "CibilReportSummaryModel",
    "MIN_CREDIT_SCORE",
    "MAX_CREDIT_SCORE",
    "CreditFactorModel",
    "ScoreHistoryEntryModel",
    "CibilScoreReportModel",
    "StringEnum",
    "ReportStatus",
    "KycStatus",
    "CreditGrade",
    "FactorImpact",
    "FactorWeight",
    "ModelError",
    "ModelValidationError",
    "ModelNotFoundError",
    "AuthenticationError",
    "DemoUserModel",
    "DemoUserPublicModel",
    "LoginRequestModel",
    "LoginResultModel",
]
