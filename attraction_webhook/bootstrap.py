"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from attraction_webhook.adapters.attractions_api import AttractionsApiAdapter
from attraction_webhook.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to the production backend."""

    return build_default_services(attractions_port=AttractionsApiAdapter())


__all__ = ["build_default_service_container"]
