"""Calendar and pattern-analysis commands for MT5 Journal CLI."""

import calendar as month_names
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from mt5journal.analysis import (
    analyze_time_patterns,
    best_trading_days,
    best_trading_hours,
    generate_calendar_days,
    month_of_latest_day,
)
from mt5journal.cli.common import (
    console,
    get_data_store,
    load_journal_or_exit,
    parse_month,
)

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@click.command(name="calendar")
@click.option("--month", type=str, default=None, help="Month to show (YYYY-MM).")
@click.pass_context
def calendar_view(ctx: click.Context, month: Optional[str]) -> None:
    """Show a month calendar with daily P&L.

    Defaults to the month of the most recent trading day.

    \b
    Examples:
      mt5journal calendar
      mt5journal calendar --month 2024-01
    """
    selected = parse_month(month)
    journal = load_journal_or_exit(get_data_store(ctx))

    year, month_number = selected or month_of_latest_day(journal)
    cells = generate_calendar_days(year, month_number, journal)

    table = Table(
        title=f"{month_names.month_name[month_number]} {year}",
        show_header=True,
        header_style="bold cyan",
        show_lines=True,
    )
    for header in WEEKDAY_HEADERS:
        table.add_column(header, justify="center", min_width=9)

    month_profit = 0.0
    month_trades = 0

    for week_start in range(0, len(cells), 7):
        row = []
        for cell in cells[week_start:week_start + 7]:
            style = "" if cell.is_current_month else "dim"
            text = f"[{style}]{cell.day_of_month}[/{style}]" if style else str(cell.day_of_month)
            if cell.has_trading:
                color = "green" if cell.profit >= 0 else "red"
                text += f"\n[{color}]{cell.profit:+,.2f}[/{color}]\n[dim]{cell.trade_count} tr[/dim]"
                if cell.is_current_month:
                    month_profit += cell.profit
                    month_trades += cell.trade_count
            row.append(text)
        table.add_row(*row)

    console.print(table)

    color = "green" if month_profit >= 0 else "red"
    console.print(
        f"\n[bold]Month:[/bold] {month_trades} trades, "
        f"[{color}]{month_profit:+,.2f}[/{color}]"
    )


@click.command()
@click.option("--min-trades", type=int, default=None, help="Minimum trades for a slot to be ranked.")
@click.option("--top", type=int, default=None, help="Number of slots to show.")
@click.pass_context
def analysis(ctx: click.Context, min_trades: Optional[int], top: Optional[int]) -> None:
    """Show the hours and weekdays with the best win rate.

    \b
    Examples:
      mt5journal analysis
      mt5journal analysis --min-trades 10 --top 5
    """
    analysis_config = ctx.obj["config"]["analysis"]
    min_trades = min_trades if min_trades is not None else analysis_config["min_trades"]
    top = top if top is not None else analysis_config["top"]

    journal = load_journal_or_exit(get_data_store(ctx))
    patterns = analyze_time_patterns(journal.all_trades())

    sections = [
        ("Best Trading Hours", best_trading_hours(patterns, min_trades, top)),
        ("Best Trading Days", best_trading_days(patterns, min_trades, top)),
    ]

    for title, buckets in sections:
        if not buckets:
            console.print(Panel(
                f"[dim]Not enough data (need {min_trades} trades per slot)[/dim]",
                title=f"[bold]{title}[/bold]",
                border_style="dim",
            ))
            continue

        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Slot", style="bold")
        table.add_column("Win Rate", justify="right")
        table.add_column("Trades", justify="right")

        for bucket in buckets:
            table.add_row(bucket.label, f"{bucket.win_rate:.1f}%", str(bucket.total))

        console.print(table)
