"""Service layer exports."""

from .cibil_report_service import CibilReportService
from .cibil_score_service import CibilScoreService
from .demo_auth_service import DemoAuthService

__all__ = [
    "CibilReportService",
    "CibilScoreService",
    "DemoAuthService",
]
