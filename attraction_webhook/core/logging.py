"""Structured logging helpers with correlation and client metadata."""

from __future__ import annotations

import logging
import sys
import tempfile
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from attraction_webhook.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_client_ip: ContextVar[Optional[str]] = ContextVar("client_ip", default=None)

LEVEL_NAME = str(getattr(settings, "WEBHOOK_LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent


def _resolve_logs_dir() -> Path:
    """Select a writable logs directory honoring configuration overrides."""

    configured_dir = getattr(settings, "WEBHOOK_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    # Precedence: explicit override → repo root logs → package-local logs → temp dir
    candidates.append(ROOT_DIR / "logs")
    candidates.append(BASE_DIR / "logs")
    candidates.append(Path(tempfile.gettempdir()) / "attraction_webhook_logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return candidate

    raise PermissionError("Unable to create a writable logs directory")


LOGS_DIR = _resolve_logs_dir()
LOG_SCHEMA_VERSION = "1.0.0"
LOG_FILE_PATH = LOGS_DIR / "attraction_webhook.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        # Explicit overrides on the record win.
        log_record.setdefault("schema_version", self._schema_version)


class CorrelationIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach correlation and client metadata to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.client_ip = get_client_ip() or "-"
        return True


def bind_correlation_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the correlation id context variable."""

    return _correlation_id.set(value)


def reset_correlation_id(token: Token[Optional[str]]) -> None:
    """Reset the correlation id context variable to a previous state."""

    _correlation_id.reset(token)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation id if bound."""

    return _correlation_id.get()


def bind_client_ip(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the client IP address associated with the current request."""

    return _client_ip.set(value)


def reset_client_ip(token: Token[Optional[str]]) -> None:
    """Reset the client IP context variable."""

    _client_ip.reset(token)


def get_client_ip() -> Optional[str]:
    """Return the current client IP if bound."""

    return _client_ip.get()


@contextmanager
def correlation_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a correlation id."""

    token = bind_correlation_id(value)
    try:
        yield
    finally:
        reset_correlation_id(token)


def _build_formatter() -> VersionedJsonFormatter:
    return VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(client_ip)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )


def _ensure_handlers(logger: logging.Logger) -> None:
    if logger.handlers:
        return

    formatter = _build_formatter()
    correlation_filter = CorrelationIdFilter()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.addFilter(correlation_filter)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    file_handler = RotatingFileHandler(
        LOG_FILE_PATH, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.addFilter(correlation_filter)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger with correlation id filtering."""

    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    _ensure_handlers(logger)
    return logger


__all__ = [
    "CorrelationIdFilter",
    "VersionedJsonFormatter",
    "bind_correlation_id",
    "bind_client_ip",
    "reset_correlation_id",
    "reset_client_ip",
    "get_correlation_id",
    "get_client_ip",
    "correlation_id_context",
    "get_logger",
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
]
