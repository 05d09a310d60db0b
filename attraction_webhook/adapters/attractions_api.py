"""HTTP adapter implementing the attractions port over httpx."""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from attraction_webhook.core.config import config
from attraction_webhook.core.exceptions import AttractionsApiError, AttractionsApiTimeoutError
from attraction_webhook.core.logging import get_logger
from attraction_webhook.core.ports import AttractionsPort

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class AttractionsApiAdapter(AttractionsPort):
    """Issue unauthenticated GET requests against the attractions backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or config.ATTRACTIONS_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.ATTRACTIONS_API_TIMEOUT_SECONDS
        self._transport = transport

    async def fetch(self, path: str) -> Any:
        logger.info("Fetching from API: %s", path)
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=DEFAULT_HEADERS,
                transport=self._transport,
            ) as client:
                response = await client.get(path)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise AttractionsApiTimeoutError(
                f"Timed out after {self.timeout}s fetching {path}", path=path
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise AttractionsApiError(
                f"Backend answered {exc.response.status_code} for {path}",
                path=path,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise AttractionsApiError(f"Request to {path} failed: {exc}", path=path) from exc

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info("API call took: %.0fms", elapsed_ms)
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise AttractionsApiError(
                f"Backend returned a non-JSON body for {path}",
                path=path,
                status_code=response.status_code,
            ) from exc


__all__ = ["AttractionsApiAdapter", "DEFAULT_HEADERS"]
