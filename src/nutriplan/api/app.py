"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nutriplan.api.admin import router as admin_router
from nutriplan.api.users import router as users_router
from nutriplan.app_logging import configure_logging
from nutriplan.config import parse_allowed_origins
from nutriplan.containers import AppContainer
from nutriplan.domain.errors import DuplicateEmailError, NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="NutriPlan")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router)
    app.include_router(admin_router)

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(DuplicateEmailError)
    async def duplicate_email(
        _request: Request, exc: DuplicateEmailError
    ) -> JSONResponse:
        logger.info("Rejected duplicate registration for %s", exc.email)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
