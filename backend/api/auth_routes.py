"""Demo authentication routes backed by the in-memory user directory."""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, status

from models.exceptions import AuthenticationError, ModelNotFoundError
from models.users import LoginRequestModel
from services.demo_auth_service import DemoAuthService


logger = logging.getLogger(__name__)


def build_auth_router(service: DemoAuthService) -> APIRouter:
    """Build login and demo user lookup routes."""
    router = APIRouter(prefix="/api/auth", tags=["auth"])

    @router.post("/login", summary="Log in as a demo user")
    def login(payload: LoginRequestModel) -> Dict[str, Any]:
        """Exchange demo credentials for a mock token."""
        if not payload.email or not payload.password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email and password are required",
            )
        try:
            return service.login(email=payload.email, password=payload.password).to_payload()
        except AuthenticationError as exc:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))

    @router.get("/users", summary="List demo users")
    def list_users() -> List[Dict[str, Any]]:
        """Return every demo user profile without passwords."""
        return [user.to_payload() for user in service.list_users()]

    @router.get("/users/{user_id}", summary="Demo user profile")
    def get_user(user_id: str) -> Dict[str, Any]:
        """Return one demo user profile."""
        try:
            return service.get_user(user_id).to_payload()
        except ModelNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

    return router
