"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Any, Protocol


class AttractionsPort(Protocol):
    """Port exposing read-only access to the attractions backend."""

    async def fetch(self, path: str) -> Any:
        """Return the decoded JSON body served at ``path``.

        Raises ``AttractionsApiError`` on transport failures, timeouts,
        non-2xx statuses and undecodable bodies.
        """
        ...


__all__ = ["AttractionsPort"]
