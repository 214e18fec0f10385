"""Unit tests for credit report and demo user models."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys
import unittest

from pydantic import ValidationError


PROJECT_ROOT = Path(__file__).resolve().parents[2]
BACKEND_ROOT = PROJECT_ROOT / "backend"
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from models.cibil_reports import CibilReportModel, CibilReportSummaryModel, LoanReferenceModel
from models.enums import KycStatus, ReportStatus
from models.users import DemoUserModel, LoginResultModel


REPORTED_AT = datetime(2026, 1, 10, 8, 0, tzinfo=timezone.utc)


def _report_kwargs(**overrides) -> dict:
    """Return a valid report payload with optional overrides."""
    payload = {
        "id": "report-user-0",
        "loan_reference": LoanReferenceModel(id="k2j4h5g6-a1b2-c3d4"),
        "borrower_id": "user_001",
        "block_number": 3,
        "amount_reported": 25000,
        "reported_at": REPORTED_AT,
        "status": ReportStatus.REPORTED,
        "resolved_at": None,
        "cibil_reference_id": "CIBIL-Z9Y8X7W6",
        "reason": "Missed minimum payment",
        "description": "Failed to make required payment by block end date",
    }
    payload.update(overrides)
    return payload


class CibilReportModelTests(unittest.TestCase):
    """Test report model invariants and serialization."""

    def test_reported_record_serializes_null_resolution(self) -> None:
        """REPORTED records keep resolvedAt as null in JSON form."""
        payload = CibilReportModel(**_report_kwargs()).to_payload()
        self.assertIn("resolvedAt", payload)
        self.assertIsNone(payload["resolvedAt"])
        self.assertEqual(payload["status"], "REPORTED")

    def test_payload_uses_camel_case_and_iso_dates(self) -> None:
        """Keys mirror the wire names and timestamps are ISO-8601 strings."""
        payload = CibilReportModel(**_report_kwargs()).to_payload()
        self.assertEqual(
            set(payload),
            {
                "id",
                "loanReference",
                "borrowerId",
                "blockNumber",
                "amountReported",
                "reportedAt",
                "status",
                "resolvedAt",
                "cibilReferenceId",
                "reason",
                "description",
            },
        )
        self.assertEqual(payload["loanReference"], {"id": "k2j4h5g6-a1b2-c3d4"})
        self.assertEqual(datetime.fromisoformat(payload["reportedAt"].replace("Z", "+00:00")), REPORTED_AT)

    def test_accepts_camel_case_input(self) -> None:
        """Models parse their own JSON form."""
        payload = CibilReportModel(**_report_kwargs()).to_payload()
        self.assertEqual(CibilReportModel.model_validate(payload).borrower_id, "user_001")

    def test_resolved_requires_resolution_date(self) -> None:
        """RESOLVED without resolved_at is rejected."""
        with self.assertRaises(ValidationError):
            CibilReportModel(**_report_kwargs(status=ReportStatus.RESOLVED))

    def test_non_resolved_rejects_resolution_date(self) -> None:
        """PENDING with a resolved_at is rejected."""
        with self.assertRaises(ValidationError):
            CibilReportModel(
                **_report_kwargs(status=ReportStatus.PENDING, resolved_at=REPORTED_AT + timedelta(days=1))
            )

    def test_resolution_cannot_precede_report(self) -> None:
        """resolved_at earlier than reported_at is rejected."""
        with self.assertRaises(ValidationError):
            CibilReportModel(
                **_report_kwargs(status=ReportStatus.RESOLVED, resolved_at=REPORTED_AT - timedelta(days=1))
            )

    def test_block_number_bounds(self) -> None:
        """Block numbers outside 1..4 are rejected."""
        with self.assertRaises(ValidationError):
            CibilReportModel(**_report_kwargs(block_number=5))

    def test_summary_defaults(self) -> None:
        """A blank summary serializes to zero counts."""
        self.assertEqual(
            CibilReportSummaryModel().to_payload(),
            {"totalReports": 0, "activeReports": 0, "resolvedReports": 0, "lastReportDate": None},
        )


class DemoUserModelTests(unittest.TestCase):
    """Test demo user projections."""

    def test_public_projection_drops_password(self) -> None:
        """Public profiles never expose the password."""
        user = DemoUserModel(
            id="user_100",
            name="Test User",
            email="test@paysafe.com",
            phone="+919000000100",
            bank_mask="HDFC-0100",
            password="demo123",
        )
        public_payload = user.to_public().to_payload()
        self.assertNotIn("password", public_payload)
        self.assertEqual(public_payload["bankMask"], "HDFC-0100")
        self.assertEqual(public_payload["kycStatus"], KycStatus.VERIFIED.value)

    def test_login_result_default_message(self) -> None:
        """Login results default to the success message."""
        user = DemoUserModel(
            id="user_100",
            name="Test User",
            email="test@paysafe.com",
            phone="+919000000100",
            password="demo123",
        )
        result = LoginResultModel(token="mock-jwt-token-user_100", user=user.to_public())
        self.assertEqual(result.to_payload()["message"], "Login successful")


if __name__ == "__main__":
    unittest.main()
