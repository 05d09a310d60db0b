"""Custom FastAPI middleware components."""

from __future__ import annotations

import time
import uuid

from attraction_webhook.core.logging import (
    bind_client_ip,
    bind_correlation_id,
    get_logger,
    reset_client_ip,
    reset_correlation_id,
)

logger = get_logger(__name__)


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Bind a correlation id for each HTTP request and echo it in responses."""

    header_names = ("X-Request-ID", "X-Correlation-ID")

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
        correlation_id = self._resolve_correlation_id(headers)
        client = scope.get("client")
        cid_token = bind_correlation_id(correlation_id)
        ip_token = bind_client_ip(client[0] if client else None)
        start_time = time.perf_counter()
        status_code: int | None = None

        async def send_wrapper(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message.get("type") == "http.response.start":
                try:
                    status_code = int(message.get("status") or 0)
                except (TypeError, ValueError):
                    status_code = None
                header_list = list(message.get("headers", []))
                existing = {key.decode().lower() for key, _ in header_list}
                for header in self.header_names:
                    if header.lower() not in existing:
                        header_list.append((header.encode(), correlation_id.encode()))
                message["headers"] = header_list
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000.0
            logger.info(
                "request completed",
                extra={
                    "event": "http_request",
                    "path": scope.get("path", ""),
                    "status_code": status_code or 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            reset_client_ip(ip_token)
            reset_correlation_id(cid_token)

    def _resolve_correlation_id(self, header_map: dict[str, str]) -> str:
        for header in self.header_names:
            value = header_map.get(header.lower())
            if value:
                return value
        return uuid.uuid4().hex


__all__ = ["CorrelationIdMiddleware"]
