"""HTTP route declarations for service-level endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from core.config import AppSettings


def build_router(settings: AppSettings) -> APIRouter:
    """Build and return application routes with injected settings."""
    router = APIRouter()

    @router.get("/", summary="Root endpoint")
    def read_root() -> dict[str, str]:
        """Return a basic message confirming service availability."""
        return {"message": "{0} is running".format(settings.app_name)}

    @router.get("/api/health", summary="Health check")
    def health_check() -> dict[str, str]:
        """Return service health status for uptime monitors."""
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": settings.environment,
        }

    return router
