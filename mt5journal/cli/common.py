"""Helpers shared by the CLI commands."""

from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from mt5journal.config import get_db_path
from mt5journal.db.store import DataStore
from mt5journal.models import JournalData

console = Console()


def error_panel(message: str, title: str = "Error") -> None:
    """Print an error panel."""
    console.print(Panel(
        message,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def get_data_store(ctx: click.Context) -> DataStore:
    """Get the data store for the configured database."""
    return DataStore(get_db_path(ctx.obj["config"]))


def load_journal_or_exit(store: DataStore) -> JournalData:
    """Load the stored journal, exiting with a hint when nothing is imported."""
    journal = store.load_journal()
    if journal is None:
        console.print(Panel(
            "[dim]No trades imported yet[/dim]\n\n"
            "Run [cyan]mt5journal import <file.csv>[/cyan] to import an MT5 report.",
            title="[bold]Journal[/bold]",
            border_style="dim",
        ))
        raise SystemExit(1)
    return journal


def format_money(value: float) -> str:
    """Signed dollar amount with rich colour markup."""
    color = "green" if value >= 0 else "red"
    sign = "+" if value >= 0 else "-"
    return f"[{color}]{sign}${abs(value):,.2f}[/{color}]"


def parse_month(value: Optional[str]) -> Optional[tuple[int, int]]:
    """Parse YYYY-MM into (year, month).

    Raises:
        click.BadParameter: If the value is not a valid month.
    """
    if value is None:
        return None
    try:
        parsed = date.fromisoformat(f"{value}-01")
    except ValueError:
        raise click.BadParameter(f"Invalid month: {value}. Use YYYY-MM")
    return parsed.year, parsed.month


def parse_day(value: str) -> str:
    """Validate a YYYY-MM-DD date and return it in ISO form."""
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise click.BadParameter(f"Invalid date: {value}. Use YYYY-MM-DD")
