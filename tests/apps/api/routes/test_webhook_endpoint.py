"""Tests for the Dialogflow /webhook endpoint."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

import logging
from http import HTTPStatus

from attraction_webhook.apps.api.routes.webhooks import FAILURE_REPLY, NOT_UNDERSTOOD_REPLY
from attraction_webhook.core.exceptions import AttractionsApiTimeoutError
from attraction_webhook.services.intent_router import INTENT_CONFIG


def _body(intent: str | None, parameters: dict | None = None) -> dict:
    query_result: dict = {"queryText": "hello"}
    if intent is not None:
        query_result["intent"] = {"displayName": intent}
    if parameters is not None:
        query_result["parameters"] = parameters
    return {"session": "projects/p/agent/sessions/s", "queryResult": query_result}


def _assert_envelope(payload: dict, reply: str) -> None:
    assert payload == {
        "fulfillmentText": reply,
        "fulfillmentMessages": [{"text": {"text": [reply]}}],
    }


def test_all_attractions_renders_intro_and_items(client, attractions) -> None:
    attractions.responses["/getAll/Attraction"] = [{"name": "Eiffel Tower", "cityName": "Paris"}]

    resp = client.post("/webhook", json=_body("Ask_All_Attractions"))

    assert resp.status_code == HTTPStatus.OK
    text = resp.json()["fulfillmentText"]
    intro = INTENT_CONFIG["Ask_All_Attractions"].intro
    assert text.startswith(intro + "\n")
    assert "🌟 Eiffel Tower (Paris)" in text.splitlines()
    _assert_envelope(resp.json(), text)


def test_missing_name_prompts_without_backend_call(client, attractions) -> None:
    resp = client.post("/webhook", json=_body("Ask_Attraction_ByName", {}))

    assert resp.status_code == HTTPStatus.OK
    _assert_envelope(resp.json(), "Please tell me the name of the attraction.")
    assert attractions.calls == []


def test_unrecognized_intent_gets_fallback_reply(client, attractions) -> None:
    resp = client.post("/webhook", json=_body("Book_A_Flight"))

    assert resp.status_code == HTTPStatus.OK
    _assert_envelope(resp.json(), NOT_UNDERSTOOD_REPLY)
    assert attractions.calls == []


def test_backend_timeout_yields_failure_reply_and_is_logged(client, attractions, caplog) -> None:
    attractions.error = AttractionsApiTimeoutError("timed out", path="/getAll/Attraction")

    with caplog.at_level(logging.ERROR):
        resp = client.post("/webhook", json=_body("Ask_All_Attractions"))

    assert resp.status_code == HTTPStatus.OK
    _assert_envelope(resp.json(), FAILURE_REPLY)
    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert errors
    assert any(getattr(record, "timeout", False) for record in errors)


def test_unexpected_error_yields_failure_reply(client, attractions, caplog) -> None:
    attractions.error = RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        resp = client.post("/webhook", json=_body("Ask_All_Attractions"))

    assert resp.status_code == HTTPStatus.OK
    _assert_envelope(resp.json(), FAILURE_REPLY)
    assert any(record.exc_info for record in caplog.records if record.levelno >= logging.ERROR)


def test_empty_backend_list_returns_empty_message(client, attractions) -> None:
    attractions.responses["/NaturalAttractions"] = []

    resp = client.post("/webhook", json=_body("Ask_Natural_Attractions"))

    _assert_envelope(resp.json(), INTENT_CONFIG["Ask_Natural_Attractions"].empty)


def test_by_city_passes_parameter_to_backend(client, attractions) -> None:
    attractions.responses["/getLocationByCity/Marrakech"] = [
        {"locationName": "Bahia Palace", "city": "Marrakech"},
        {"name": "Menara Gardens"},
    ]

    resp = client.post(
        "/webhook", json=_body("Ask_Attractions_ByCity", {"cityName": "Marrakech"})
    )

    assert attractions.calls == ["/getLocationByCity/Marrakech"]
    assert resp.json()["fulfillmentText"] == (
        f"{INTENT_CONFIG['Ask_Attractions_ByCity'].intro}\n"
        "🏙️ Bahia Palace (Marrakech)\n\n"
        "🏙️ Menara Gardens (Unknown)"
    )


def test_missing_intent_name_is_not_understood(client, attractions) -> None:
    resp = client.post("/webhook", json=_body(None))

    assert resp.status_code == HTTPStatus.OK
    _assert_envelope(resp.json(), NOT_UNDERSTOOD_REPLY)
    assert attractions.calls == []


def test_invalid_json_is_not_understood(client) -> None:
    resp = client.post(
        "/webhook", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert resp.status_code == HTTPStatus.OK
    _assert_envelope(resp.json(), NOT_UNDERSTOOD_REPLY)


def test_non_object_body_is_not_understood(client) -> None:
    resp = client.post("/webhook", json=["Ask_All_Attractions"])

    assert resp.status_code == HTTPStatus.OK
    _assert_envelope(resp.json(), NOT_UNDERSTOOD_REPLY)


def test_correlation_id_is_echoed(client, attractions) -> None:
    attractions.default = []
    resp = client.post(
        "/webhook",
        json=_body("Ask_Cultural_Attractions"),
        headers={"X-Request-ID": "req-123"},
    )

    assert resp.headers["X-Request-ID"] == "req-123"
    assert resp.headers["X-Correlation-ID"] == "req-123"
