"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cashbook.api.routers import analysis_router, auth_router, ledger_router, transactions_router
from cashbook.app_context import AppContext
from cashbook.config.logging_config import setup_logging
from cashbook.config.settings import Settings, get_settings
from cashbook.core.exceptions import AppError

_STATUS_BY_CODE = {
    "VALIDATION_ERROR": 422,
    "NOT_AUTHENTICATED": 401,
    "FETCH_FAILED": 502,
    "ADD_FAILED": 502,
    "DELETE_FAILED": 502,
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app; one AppContext lives for the app's lifespan."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging(settings)
        context = AppContext(settings)
        await context.start()
        app.state.context = context
        yield
        # Shutdown
        await context.close()

    app = FastAPI(
        title=settings.app_name,
        description="Personal income and expense ledger",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(auth_router)
    app.include_router(ledger_router)
    app.include_router(transactions_router)
    app.include_router(analysis_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return JSONResponse(
            status_code=_STATUS_BY_CODE.get(exc.code, 400),
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app
