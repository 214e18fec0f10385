"""Shared base models and common type aliases."""

from datetime import datetime, timezone
import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .exceptions import ModelValidationError


logger = logging.getLogger(__name__)

Money = int


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(timezone.utc)


class CamelCaseModel(BaseModel):
    """Base schema whose JSON form uses camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize model into a JSON-ready dictionary with camelCase keys.

        Timestamps become ISO-8601 strings and absent optional values are
        kept as ``None``.

        Returns:
            Dict[str, Any]: Serialized model payload.

        Raises:
            ModelValidationError: If serialization fails.
        """
        try:
            return self.model_dump(mode="json", by_alias=True)
        except Exception as exc:
            logger.exception("Failed to serialize %s", self.__class__.__name__)
            raise ModelValidationError(str(exc))
