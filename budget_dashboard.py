"""Mini README: Command line entry point for Budget Board.

This script exposes a Typer CLI that starts the FastAPI dashboard, prints
the current summary, or writes the monthly CSV export. Storage location and
key come from ``BUDGETBOARD_*`` environment variables when set.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from budgetboard.configuration import get_settings
from budgetboard.export import CsvExporter
from budgetboard.logging_utils import set_log_level
from budgetboard.storage import BudgetStore, JsonFileBackend

cli = typer.Typer(help="Run and inspect the personal budget dashboard.")


def _open_store() -> BudgetStore:
    settings = get_settings()
    set_log_level(settings.log_level)
    store = BudgetStore(JsonFileBackend(settings.storage_path), key=settings.storage_key)
    store.initialize()
    return store


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the dashboard using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    set_log_level(settings.log_level)

    # Browsers cannot open the 0.0.0.0 wildcard, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Budget Board on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "budgetboard.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print income, totals and the remaining discretionary balance."""

    totals = _open_store().summary()
    typer.echo(f"Income:              ${totals.income:.2f}")
    typer.echo(f"Recurring:           ${totals.total_recurring:.2f}")
    typer.echo(f"Pending:             ${totals.total_pending:.2f}")
    typer.echo(f"Credit cards:        ${totals.total_card_balances:.2f}")
    typer.echo(f"Discretionary spent: ${totals.total_extras:.2f}")
    typer.echo(f"Remaining:           ${totals.discretionary_remaining:.2f}")


@cli.command()
def export(
    directory: Optional[Path] = typer.Option(
        None, help="Directory for the CSV file. Defaults to the configured export directory."
    ),
) -> None:
    """Write budget_YYYY-MM.csv for the current month."""

    target = directory or get_settings().resolved_export_directory
    path = CsvExporter().export(_open_store().state, target)
    typer.echo(f"Wrote {path}")


if __name__ == "__main__":
    cli()
