"""CLI commands for inspecting and exercising intents."""

from __future__ import annotations

import asyncio
import uuid
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from attraction_webhook.apps.api.routes.webhooks import FAILURE_REPLY, NOT_UNDERSTOOD_REPLY
from attraction_webhook.bootstrap import build_default_service_container
from attraction_webhook.core.config import config
from attraction_webhook.core.exceptions import AttractionsApiError
from attraction_webhook.core.logging import correlation_id_context
from attraction_webhook.services import runtime
from attraction_webhook.services.intent_router import INTENT_CONFIG, IntentRouter

app = typer.Typer(name="intents", help="Inspect configured intents")
console = Console()


def _get_router() -> IntentRouter:
    """Return the registered intent router, wiring the production backend if none is."""
    try:
        services = runtime.get_services()
    except RuntimeError:
        services = build_default_service_container()
        runtime.set_services(services)
    if services.intent_router is None:
        raise RuntimeError("Intent router is not configured.")
    return services.intent_router


def _parse_params(raw_params: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in raw_params:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got {item!r}", param_hint="--param")
        params[key.strip()] = value
    return params


@app.command("list")
def list_intents() -> None:
    """List configured intents and their backend paths."""
    table = Table(title="Configured Intents")
    table.add_column("Intent", style="cyan")
    table.add_column("Path")
    table.add_column("Icon")
    table.add_column("Formatter")
    table.add_column("Required")

    for name, intent in INTENT_CONFIG.items():
        formatter = intent.formatter.__name__ if intent.formatter else "terse_formatter"
        required = ", ".join(intent.required_param.keys) if intent.required_param else "-"
        table.add_row(name, intent.path, intent.icon, formatter, required)

    console.print(table)


def ask(
    intent: str = typer.Argument(..., help="Intent display name, e.g. Ask_All_Attractions"),
    param: Optional[list[str]] = typer.Option(
        None, "--param", "-p", help="Intent parameter as key=value (repeatable)"
    ),
) -> None:
    """Resolve an intent against the backend and print the reply."""
    params = _parse_params(param or [])
    router = _get_router()
    try:
        with correlation_id_context(f"cli-{uuid.uuid4().hex}"):
            reply = asyncio.run(router.handle_intent(intent, params))
    except AttractionsApiError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print(FAILURE_REPLY, markup=False)
        raise typer.Exit(1) from e

    console.print(reply if reply is not None else NOT_UNDERSTOOD_REPLY, markup=False)


def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (defaults to HOST)"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port (defaults to PORT)"),
) -> None:
    """Run the webhook server with uvicorn."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    bind_host = host or config.HOST
    bind_port = port or config.PORT
    console.print(f"[green]Webhook is running on http://localhost:{bind_port}[/green]")
    uvicorn.run(
        "attraction_webhook.api_factory:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
    )


__all__ = ["app", "ask", "list_intents", "serve"]
