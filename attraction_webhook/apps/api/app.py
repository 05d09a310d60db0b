"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from attraction_webhook.apps.api.middleware import CorrelationIdMiddleware
from attraction_webhook.core.config import config
from attraction_webhook.core.logging import get_logger
from attraction_webhook.services import ServiceContainer
from attraction_webhook.services import runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and make the app's services available process-wide."""
    logger.info("Initializing attraction webhook...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
    logger.info("Backend base URL: %s", config.ATTRACTIONS_API_BASE_URL)
    try:
        yield
    finally:
        logger.info("Attraction webhook shutting down.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(title="Attraction Webhook", lifespan=lifespan)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import diagnostics, health, webhooks  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(webhooks.router)
    app.include_router(diagnostics.router)
    return app


__all__ = ["create_app", "lifespan"]
