"""
Passage API - FastAPI application entry point.

This module builds the FastAPI application and registers the strategy routes.
"""

from typing import Any

from fastapi import FastAPI

from passage_core import get_logger, init_logging
from passage_core.config import StrategySettings, strategy_settings

from .routers import auth

logger = get_logger(__name__)


def create_app(
    settings: StrategySettings | None = None,
    providers: dict[str, dict[str, Any]] | None = None,
) -> FastAPI:
    """
    Build an application instance.

    Args:
        settings: Strategy settings (global settings if omitted).
        providers: Provider configuration; parsed from settings if omitted.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or strategy_settings
    init_logging(settings.log_level)

    app = FastAPI(title="Passage API", description="Authentication strategy pipeline")
    app.state.settings = settings
    app.state.providers = providers if providers is not None else settings.get_providers()

    app.include_router(auth.router, prefix=settings.base_path.rstrip("/"), tags=["Authentication"])

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status.
        """
        return {"status": "healthy"}

    logger.info(
        "Passage API configured",
        extra={"base_path": settings.base_path, "providers": sorted(app.state.providers)},
    )
    return app
