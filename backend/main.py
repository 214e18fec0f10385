"""Application entrypoint for the PaySafe mock CIBIL FastAPI backend."""

import sys
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Ensure backend packages are importable when run as a script
# ---------------------------------------------------------------------------
_BACKEND_DIR = Path(__file__).resolve().parent
if str(_BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(_BACKEND_DIR))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from api.auth_routes import build_auth_router
from api.cibil_routes import build_cibil_router
from api.routes import build_router
from core import AppSettings, get_logger, load_settings, setup_logging
from services import CibilReportService, CibilScoreService, DemoAuthService


logger = get_logger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    report_service: Optional[CibilReportService] = None,
    auth_service: Optional[DemoAuthService] = None,
    score_service: Optional[CibilScoreService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(build_router(settings))
    auth_service = auth_service or DemoAuthService()
    app.include_router(build_auth_router(auth_service))
    app.include_router(
        build_cibil_router(
            report_service or CibilReportService(),
            score_service or CibilScoreService(auth_service=auth_service),
        )
    )

    logger.info("Application initialized: %s (environment=%s)", settings.app_name, settings.environment)
    return app


app = create_app()


def run() -> None:
    """Start the ASGI server for local development."""
    settings = load_settings()
    try:
        uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
    except Exception:
        logger.exception("Failed to start uvicorn server.")
        raise


if __name__ == "__main__":
    run()
