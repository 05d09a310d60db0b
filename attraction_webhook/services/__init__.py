"""Application service layer wiring for intent handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from attraction_webhook.core.ports import AttractionsPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to routes."""

    attractions: Optional[AttractionsPort] = None
    intent_router: Optional["IntentRouter"] = None


def build_default_services(
    *,
    attractions_port: Optional[AttractionsPort] = None,
) -> ServiceContainer:
    """Return a service container with the intent router bound to ``attractions_port``."""

    from .intent_router import IntentRouter  # pylint: disable=import-outside-toplevel

    intent_router = IntentRouter(attractions_port) if attractions_port is not None else None
    return ServiceContainer(attractions=attractions_port, intent_router=intent_router)


__all__ = ["ServiceContainer", "build_default_services"]
