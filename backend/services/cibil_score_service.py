"""Mock bureau score engine: score, grade, factors and monthly history.

Scores are derived from the demo user profile plus random jitter. There is no
loan ledger, so every borrower is scored with an empty loan history.
"""

from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime, timedelta
import logging
from threading import RLock
from typing import ContextManager, List, Optional
import uuid

import numpy as np
import pandas as pd

from models.base import utc_now
from models.credit_scores import (
    MAX_CREDIT_SCORE,
    MIN_CREDIT_SCORE,
    CibilScoreReportModel,
    CreditFactorModel,
    ScoreHistoryEntryModel,
)
from models.enums import CreditGrade, FactorImpact, FactorWeight, KycStatus
from models.exceptions import ModelNotFoundError
from models.users import DemoUserPublicModel
from services.demo_auth_service import DemoAuthService


logger = logging.getLogger(__name__)

BASE_SCORE = 650
KYC_VERIFIED_BONUS = 50
CONTACT_DETAILS_BONUS = 30
SCORE_JITTER = 50

HISTORY_MONTHS = 12
HISTORY_MONTHLY_STEP = 5
HISTORY_JITTER = 10
REPORT_VALIDITY_DAYS = 30

_GRADE_CUTOFFS = [
    (800, CreditGrade.EXCELLENT),
    (750, CreditGrade.VERY_GOOD),
    (700, CreditGrade.GOOD),
    (650, CreditGrade.FAIR),
    (600, CreditGrade.POOR),
]


def clamp_score(value: int) -> int:
    """Keep a score inside the 300-900 bureau range."""
    return max(MIN_CREDIT_SCORE, min(MAX_CREDIT_SCORE, int(value)))


def grade_for_score(score: int) -> CreditGrade:
    """Map a score onto its grade band."""
    for cutoff, grade in _GRADE_CUTOFFS:
        if score >= cutoff:
            return grade
    return CreditGrade.VERY_POOR


def generate_score(rng: np.random.Generator, profile: Optional[DemoUserPublicModel]) -> int:
    """Score a borrower from profile signals plus jitter in [-50, 49]."""
    score = BASE_SCORE
    if profile is not None:
        if profile.kyc_status == KycStatus.VERIFIED:
            score += KYC_VERIFIED_BONUS
        if profile.phone and profile.email:
            score += CONTACT_DETAILS_BONUS
    score += int(rng.integers(-SCORE_JITTER, SCORE_JITTER))
    return clamp_score(score)


def credit_factors(profile: Optional[DemoUserPublicModel]) -> List[CreditFactorModel]:
    """List the explainable factors for a borrower with no loan history."""
    kyc_verified = profile is not None and profile.kyc_status == KycStatus.VERIFIED
    return [
        CreditFactorModel(
            factor="Payment History",
            impact=FactorImpact.POSITIVE,
            description="No late payments or defaults",
            weight=FactorWeight.HIGH,
        ),
        CreditFactorModel(
            factor="Credit Utilization",
            impact=FactorImpact.POSITIVE,
            description="Low credit utilization",
            weight=FactorWeight.MEDIUM,
        ),
        CreditFactorModel(
            factor="Identity Verification",
            impact=FactorImpact.POSITIVE if kyc_verified else FactorImpact.NEGATIVE,
            description="KYC documents verified" if kyc_verified else "KYC verification pending",
            weight=FactorWeight.MEDIUM,
        ),
        CreditFactorModel(
            factor="Credit Mix",
            impact=FactorImpact.NEUTRAL,
            description="Limited credit history",
            weight=FactorWeight.LOW,
        ),
    ]


def score_change_reason(change: Optional[int]) -> str:
    """Describe a month-over-month score change."""
    if change is None:
        return "Initial score"
    if change > 5:
        return "Payment made on time"
    if change > 0:
        return "Credit utilization improved"
    if change < -5:
        return "Payment missed or delayed"
    if change < 0:
        return "Credit utilization increased"
    return "No significant changes"


def generate_score_history(
    rng: np.random.Generator,
    current_score: int,
    now: Optional[datetime] = None,
) -> List[ScoreHistoryEntryModel]:
    """Build oldest-first monthly snapshots ending at the current score.

    Holds one entry per month for the last twelve months plus the current
    month. Earlier months trend five points lower per month with +/-10 jitter.
    """
    reference = pd.Timestamp(now if now is not None else utc_now())
    history: List[ScoreHistoryEntryModel] = []
    previous: Optional[int] = None
    for months_ago in range(HISTORY_MONTHS, -1, -1):
        if months_ago == 0:
            score = clamp_score(current_score)
        else:
            jitter = int(rng.integers(-HISTORY_JITTER, HISTORY_JITTER))
            score = clamp_score(current_score - months_ago * HISTORY_MONTHLY_STEP + jitter)
        change = None if previous is None else score - previous
        history.append(
            ScoreHistoryEntryModel(
                snapshot_date=(reference - pd.DateOffset(months=months_ago)).date(),
                score=score,
                change=change or 0,
                reason=score_change_reason(change),
            )
        )
        previous = score
    return history


def generate_score_report(
    rng: np.random.Generator,
    borrower_id: str,
    profile: Optional[DemoUserPublicModel],
    now: Optional[datetime] = None,
) -> CibilScoreReportModel:
    """Assemble a full score report for one borrower."""
    generated_at = now if now is not None else utc_now()
    score = generate_score(rng, profile)
    report = CibilScoreReportModel(
        id=str(uuid.UUID(bytes=rng.bytes(16), version=4)),
        borrower_id=borrower_id,
        score=score,
        grade=grade_for_score(score),
        factors=credit_factors(profile),
        history=generate_score_history(rng, score, now=generated_at),
        generated_at=generated_at,
        valid_until=generated_at + timedelta(days=REPORT_VALIDITY_DAYS),
    )
    logger.debug("Generated mock CIBIL score borrower_id=%s score=%d grade=%s", borrower_id, score, report.grade.value)
    return report


class CibilScoreService:
    """Score lookups over the demo user directory."""

    def __init__(
        self,
        auth_service: Optional[DemoAuthService] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._auth_service = auth_service or DemoAuthService()
        self._rng = rng
        self._lock = RLock()

    def _guard(self) -> ContextManager:
        return self._lock if self._rng is not None else nullcontext()

    def _profile(self, borrower_id: str) -> Optional[DemoUserPublicModel]:
        """Return the directory profile, or None for borrowers outside it."""
        try:
            return self._auth_service.get_user(borrower_id)
        except ModelNotFoundError:
            logger.debug("Scoring borrower_id=%s without a directory profile", borrower_id)
            return None

    def get_score_report(self, borrower_id: str, now: Optional[datetime] = None) -> CibilScoreReportModel:
        """Return a freshly generated score report; never persisted."""
        profile = self._profile(borrower_id)
        with self._guard():
            rng = self._rng if self._rng is not None else np.random.default_rng()
            return generate_score_report(rng, borrower_id, profile, now=now)
