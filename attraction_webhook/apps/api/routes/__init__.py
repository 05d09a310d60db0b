"""Router namespace exports for FastAPI include hooks."""

from . import diagnostics, health, webhooks

__all__ = ["diagnostics", "health", "webhooks"]
