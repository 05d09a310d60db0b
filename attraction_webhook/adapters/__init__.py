"""Infrastructure adapter exports."""

from attraction_webhook.core.exceptions import (  # noqa: F401
    AttractionsApiError,
    AttractionsApiTimeoutError,
)

from .attractions_api import AttractionsApiAdapter

__all__ = [
    "AttractionsApiAdapter",
    "AttractionsApiError",
    "AttractionsApiTimeoutError",
]
