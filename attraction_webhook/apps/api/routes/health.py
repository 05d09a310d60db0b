"""Health route."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    """Liveness probe used by the hosting platform."""
    return "OK"


__all__ = ["router"]
