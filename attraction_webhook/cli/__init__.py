"""CLI commands for attraction-webhook."""

import typer

from attraction_webhook.cli.intents import app as intents_app
from attraction_webhook.cli.intents import ask, serve

main_app = typer.Typer(
    name="attraction-webhook",
    help="Attraction webhook CLI",
    no_args_is_help=True,
)
main_app.add_typer(intents_app, name="intents")
main_app.command("ask")(ask)
main_app.command("serve")(serve)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
