"""Diagnostics probe for the attractions backend."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from attraction_webhook.apps.api.dependencies import get_attractions_port
from attraction_webhook.core.exceptions import AttractionsApiError
from attraction_webhook.core.intents import IntentType
from attraction_webhook.core.logging import get_logger
from attraction_webhook.core.ports import AttractionsPort
from attraction_webhook.services.intent_router import INTENT_CONFIG

router = APIRouter()
logger = get_logger(__name__)

PROBE_PATH = INTENT_CONFIG[IntentType.ASK_ALL_ATTRACTIONS.value].path


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/test-api")
async def probe_backend(
    attractions: Annotated[AttractionsPort, Depends(get_attractions_port)],
) -> JSONResponse:
    """Fetch the full attraction list once and report latency and size."""
    start = time.perf_counter()
    try:
        data = await attractions.fetch(PROBE_PATH)
    except AttractionsApiError as exc:
        logger.warning("Backend probe failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": str(exc),
                "statusCode": exc.status_code,
                "timestamp": _now(),
            },
        )
    response_time = round((time.perf_counter() - start) * 1000.0)
    if data is None:
        count = 0
    else:
        count = len(data) if isinstance(data, list) else 1
    return JSONResponse(
        {
            "success": True,
            "responseTime": response_time,
            "dataCount": count,
            "timestamp": _now(),
        }
    )


__all__ = ["router", "PROBE_PATH"]
