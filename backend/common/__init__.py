"""Common reusable utility exports."""

from .random_primitives import (
    amount,
    block_number,
    past_date,
    reference_code,
    resolution_date,
    status,
    synthetic_id,
)

__all__ = [
    "amount",
    "block_number",
    "past_date",
    "reference_code",
    "resolution_date",
    "status",
    "synthetic_id",
]
