"""Tests for the health and backend diagnostics routes."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

from http import HTTPStatus

from attraction_webhook.apps.api.routes.diagnostics import PROBE_PATH
from attraction_webhook.core.exceptions import AttractionsApiError


def test_root_returns_plain_ok(client) -> None:
    resp = client.get("/")

    assert resp.status_code == HTTPStatus.OK
    assert resp.text == "OK"
    assert resp.headers["content-type"].startswith("text/plain")


def test_probe_reports_item_count(client, attractions) -> None:
    attractions.responses[PROBE_PATH] = [{"name": "a"}, {"name": "b"}, {"name": "c"}]

    resp = client.get("/test-api")

    assert resp.status_code == HTTPStatus.OK
    body = resp.json()
    assert body["success"] is True
    assert body["dataCount"] == 3
    assert isinstance(body["responseTime"], int)
    assert "timestamp" in body
    assert attractions.calls == ["/getAll/Attraction"]


def test_probe_counts_single_object_as_one(client, attractions) -> None:
    attractions.responses[PROBE_PATH] = {"name": "solo"}

    assert client.get("/test-api").json()["dataCount"] == 1


def test_probe_failure_returns_500(client, attractions) -> None:
    attractions.error = AttractionsApiError("backend down", path=PROBE_PATH, status_code=502)

    resp = client.get("/test-api")

    assert resp.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "backend down"
    assert body["statusCode"] == 502
