"""Pydantic models describing the Dialogflow fulfillment contract."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Intent(BaseModel):
    """Matched intent as reported by Dialogflow."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    display_name: Optional[str] = Field(default=None, alias="displayName")


class QueryResult(BaseModel):
    """The ``queryResult`` block of a fulfillment request."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    intent: Optional[Intent] = None
    parameters: Optional[dict[str, Any]] = None
    query_text: Optional[str] = Field(default=None, alias="queryText")


class WebhookRequest(BaseModel):
    """Inbound fulfillment request; unknown fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    session: Optional[str] = None
    query_result: Optional[QueryResult] = Field(default=None, alias="queryResult")

    @property
    def intent_name(self) -> Optional[str]:
        """Return the matched intent display name, if any."""
        if self.query_result is None or self.query_result.intent is None:
            return None
        return self.query_result.intent.display_name

    @property
    def parameters(self) -> dict[str, Any]:
        """Return the resolved intent parameters (empty when absent)."""
        if self.query_result is None:
            return {}
        return dict(self.query_result.parameters or {})


class TextPayload(BaseModel):
    """Inner ``text`` block of a fulfillment message."""

    text: list[str]


class FulfillmentMessage(BaseModel):
    """One rich message entry in a fulfillment response."""

    text: TextPayload


class FulfillmentResponse(BaseModel):
    """Outbound fulfillment payload returned to Dialogflow."""

    model_config = ConfigDict(populate_by_name=True)

    fulfillment_text: str = Field(alias="fulfillmentText")
    fulfillment_messages: list[FulfillmentMessage] = Field(alias="fulfillmentMessages")

    @classmethod
    def from_text(cls, reply: str) -> "FulfillmentResponse":
        """Wrap ``reply`` as a single combined text block."""
        return cls(
            fulfillmentText=reply,
            fulfillmentMessages=[FulfillmentMessage(text=TextPayload(text=[reply]))],
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize using the camelCase field names Dialogflow expects."""
        return self.model_dump(by_alias=True)


__all__ = [
    "FulfillmentMessage",
    "FulfillmentResponse",
    "Intent",
    "QueryResult",
    "TextPayload",
    "WebhookRequest",
]
