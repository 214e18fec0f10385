"""Mock CIBIL routes serving freshly synthesized bureau reports."""

import logging
import re
from typing import Any, Dict
from urllib.parse import quote

from fastapi import APIRouter, Query, Response

from services.cibil_report_service import CibilReportService
from services.cibil_score_service import CibilScoreService


logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def csv_content_disposition(borrower_id: str) -> str:
    """Build an attachment header that stays latin-1 safe for any borrower id.

    The plain `filename` is an ASCII fallback; `filename*` carries the exact
    name percent-encoded as UTF-8.
    """
    filename = "cibil-reports-{0}.csv".format(borrower_id or "all")
    fallback = _UNSAFE_FILENAME_CHARS.sub("_", filename)
    return "attachment; filename=\"{0}\"; filename*=UTF-8''{1}".format(fallback, quote(filename, safe=""))


def build_cibil_router(report_service: CibilReportService, score_service: CibilScoreService) -> APIRouter:
    """Build report, summary and score routes around the mock bureau services."""
    router = APIRouter(prefix="/api/cibil", tags=["cibil"])

    @router.get("/reports", summary="Synthetic CIBIL reports for a borrower")
    def get_reports(borrower_id: str = Query(default="", alias="borrowerId")) -> Dict[str, Any]:
        """Return a newest-first report list; every call regenerates it."""
        reports = report_service.get_reports(borrower_id)
        logger.info("Served %d CIBIL reports for borrower_id=%s", len(reports), borrower_id)
        return {"reports": [report.to_payload() for report in reports]}

    @router.get("/summary", summary="Synthetic CIBIL summary for a borrower")
    def get_summary(borrower_id: str = Query(default="", alias="borrowerId")) -> Dict[str, Any]:
        """Return summary counts over an independently generated report set."""
        summary = report_service.get_summary(borrower_id)
        logger.info(
            "Served CIBIL summary borrower_id=%s total=%d",
            borrower_id,
            summary.total_reports,
        )
        return summary.to_payload()

    @router.get("/score", summary="Synthetic CIBIL score report for a borrower")
    def get_score(borrower_id: str = Query(default="", alias="borrowerId")) -> Dict[str, Any]:
        """Return score, grade, factors and monthly history."""
        report = score_service.get_score_report(borrower_id)
        logger.info("Served CIBIL score borrower_id=%s score=%d", borrower_id, report.score)
        return report.to_payload()

    @router.get("/reports/export/csv", summary="Export synthetic CIBIL reports as CSV")
    def export_reports_csv(borrower_id: str = Query(default="", alias="borrowerId")) -> Response:
        """Return a fresh report set as a CSV attachment."""
        content = report_service.export_reports_csv(borrower_id)
        return Response(
            content=content,
            media_type="text/csv",
            headers={"Content-Disposition": csv_content_disposition(borrower_id)},
        )

    return router
