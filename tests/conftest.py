"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
"""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Iterator

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep tests away from the real backend and the repo log directory
os.environ.setdefault("ATTRACTIONS_API_BASE_URL", "http://backend.test/api/public")
os.environ.setdefault(
    "WEBHOOK_LOG_DIR", str(Path(tempfile.gettempdir()) / "attraction_webhook_tests")
)

# pylint: disable=wrong-import-position
from attraction_webhook.apps.api.app import create_app  # noqa: E402
from attraction_webhook.services import ServiceContainer, build_default_services  # noqa: E402
from attraction_webhook.services import runtime  # noqa: E402


class FakeAttractionsPort:
    """In-memory attractions backend recording every requested path."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.responses: dict[str, Any] = {}
        self.default: Any = None
        self.error: Exception | None = None

    async def fetch(self, path: str) -> Any:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.responses.get(path, self.default)


@pytest.fixture
def attractions() -> FakeAttractionsPort:
    """Fresh fake backend per test."""
    return FakeAttractionsPort()


@pytest.fixture
def services(attractions: FakeAttractionsPort) -> Iterator[ServiceContainer]:
    """Service container wired to the fake backend."""
    container = build_default_services(attractions_port=attractions)
    yield container
    runtime.clear_services()


@pytest.fixture
def client(services: ServiceContainer) -> TestClient:
    """Test client for an app bound to the fake backend."""
    return TestClient(create_app(services))
