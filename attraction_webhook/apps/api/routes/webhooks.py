"""Dialogflow fulfillment webhook route."""

from __future__ import annotations

import json
import time
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from attraction_webhook.apps.api.dependencies import get_intent_router
from attraction_webhook.core.api_models import FulfillmentResponse, WebhookRequest
from attraction_webhook.core.exceptions import AttractionsApiError, AttractionsApiTimeoutError
from attraction_webhook.core.logging import get_logger
from attraction_webhook.services.intent_router import IntentRouter

router = APIRouter()
logger = get_logger(__name__)

NOT_UNDERSTOOD_REPLY = "Sorry, I didn't understand your request."
FAILURE_REPLY = "Oops, something went wrong while fetching information. Please try again later!"


def fulfillment(reply: str) -> JSONResponse:
    """Wrap ``reply`` in the fulfillment envelope with a 200 status."""
    return JSONResponse(FulfillmentResponse.from_text(reply).to_payload())


async def _parse_request(request: Request) -> WebhookRequest | None:
    try:
        body: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Webhook body is not valid JSON.")
        return None
    if not isinstance(body, dict):
        logger.warning("Webhook body is not a JSON object.")
        return None
    try:
        return WebhookRequest.model_validate(body)
    except ValidationError:
        logger.warning("Webhook body does not match the fulfillment schema.", exc_info=True)
        return None


@router.post("/webhook")
async def handle_webhook(
    request: Request,
    intent_router: Annotated[IntentRouter, Depends(get_intent_router)],
) -> JSONResponse:
    """Answer a fulfillment request; always responds 200 with a reply."""
    start = time.perf_counter()
    webhook_request = await _parse_request(request)
    intent_name = webhook_request.intent_name if webhook_request else None
    logger.info("Received intent: %s", intent_name)
    if webhook_request is None or not intent_name:
        return fulfillment(NOT_UNDERSTOOD_REPLY)

    try:
        reply = await intent_router.handle_intent(intent_name, webhook_request.parameters)
    except AttractionsApiError as exc:
        logger.error(
            "Fetch error: %s",
            exc,
            extra={
                "upstream_path": exc.path,
                "upstream_status": exc.status_code,
                "timeout": isinstance(exc, AttractionsApiTimeoutError),
            },
            exc_info=True,
        )
        return fulfillment(FAILURE_REPLY)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Unexpected error while handling intent %s", intent_name)
        return fulfillment(FAILURE_REPLY)

    logger.info("Total processing time: %.0fms", (time.perf_counter() - start) * 1000.0)
    return fulfillment(reply if reply is not None else NOT_UNDERSTOOD_REPLY)


__all__ = ["router", "FAILURE_REPLY", "NOT_UNDERSTOOD_REPLY", "fulfillment"]
