"""Reusable enums for credit report and user models."""

from enum import Enum


class StringEnum(str, Enum):
    """Base enum class with string behavior for JSON serialization."""


class ReportStatus(StringEnum):
    """Lifecycle tag assigned to a synthetic credit bureau report."""

    REPORTED = "REPORTED"
    RESOLVED = "RESOLVED"
    PENDING = "PENDING"


class KycStatus(StringEnum):
    """KYC verification states known to the demo directory."""

    NOT_STARTED = "NOT_STARTED"
    VERIFIED = "VERIFIED"


class CreditGrade(StringEnum):
    """Bureau-style grade bands for a credit score."""

    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    VERY_POOR = "Very Poor"


class FactorImpact(StringEnum):
    """Direction in which a credit factor moves the score."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class FactorWeight(StringEnum):
    """Relative importance of a credit factor."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
