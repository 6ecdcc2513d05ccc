"""Mini README: Entry point CLI for Pocket Ledger.

This script exposes a Typer CLI with a ``serve`` command that starts the
FastAPI gateway under uvicorn, and a ``client`` group that renders the
terminal dashboard against a running gateway. Settings come from the
environment (or ``.env``) and are read once at startup.
"""

from __future__ import annotations

import typer
import uvicorn

from pocketledger.configuration import get_settings
from pocketledger.interface import dashboard_cli
from pocketledger.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Run the Pocket Ledger API or browse it from the terminal.")
cli.add_typer(dashboard_cli, name="client")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI gateway using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # 0.0.0.0 is a bind address only; print a URL a browser can open.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Pocket Ledger on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}/api"
    )
    uvicorn.run(
        "pocketledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
    )


if __name__ == "__main__":
    cli()
