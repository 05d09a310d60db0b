"""Shared FastAPI dependencies for service access."""

from fastapi import HTTPException, Request, status

from attraction_webhook.core.ports import AttractionsPort
from attraction_webhook.services import ServiceContainer
from attraction_webhook.services.intent_router import IntentRouter


def get_service_container(request: Request) -> ServiceContainer:
    """Return the service container attached to the running app."""
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        )
    return services


def get_intent_router(request: Request) -> IntentRouter:
    """Return the configured intent router."""
    router = get_service_container(request).intent_router
    if router is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Intent router is unavailable",
        )
    return router


def get_attractions_port(request: Request) -> AttractionsPort:
    """Return the configured attractions backend port."""
    attractions = get_service_container(request).attractions
    if attractions is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Attractions backend is unavailable",
        )
    return attractions


__all__ = ["get_attractions_port", "get_intent_router", "get_service_container"]
