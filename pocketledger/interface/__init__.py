"""Mini README: Interfaces (HTTP API and terminal dashboard) for Pocket Ledger.

Exports the FastAPI application factory serving the transaction API and the
Typer sub-application that renders the dashboard from that API.
"""

from .dashboard import cli as dashboard_cli
from .web_app import create_application

__all__ = ["create_application", "dashboard_cli"]
