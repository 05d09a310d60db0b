"""Core exception types shared across layers."""

from __future__ import annotations


class AttractionsApiError(Exception):
    """Raised when the attractions backend cannot be reached or answers badly."""

    def __init__(self, message: str, *, path: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class AttractionsApiTimeoutError(AttractionsApiError):
    """Raised when the attractions backend does not answer within the timeout."""


__all__ = ["AttractionsApiError", "AttractionsApiTimeoutError"]
