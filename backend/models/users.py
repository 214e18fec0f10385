"""Demo user models for the in-memory login gateway."""

from typing import Optional

from pydantic import Field

from .base import CamelCaseModel
from .enums import KycStatus


class DemoUserPublicModel(CamelCaseModel):
    """User profile fields that are safe to return to clients."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=2)
    email: str = Field(..., min_length=5)
    phone: str = Field(..., min_length=8)
    bank_mask: Optional[str] = Field(default=None)
    kyc_status: KycStatus = Field(default=KycStatus.VERIFIED)


class DemoUserModel(DemoUserPublicModel):
    """Directory entry including the plain demo password."""

    password: str = Field(..., min_length=1)

    def to_public(self) -> DemoUserPublicModel:
        """Drop the password before the user leaves the service layer."""
        return DemoUserPublicModel(**self.model_dump(exclude={"password"}))


class LoginRequestModel(CamelCaseModel):
    """Login payload; blank fields are rejected by the route, not the schema."""

    email: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)


class LoginResultModel(CamelCaseModel):
    """Successful login response with the demo token."""

    message: str = Field(default="Login successful")
    token: str = Field(..., min_length=1)
    user: DemoUserPublicModel
