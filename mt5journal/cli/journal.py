"""Journal commands for MT5 Journal CLI.

Handles statistics, day listings, day details and observations.
"""

from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from mt5journal.cli.common import (
    console,
    error_panel,
    format_money,
    get_data_store,
    load_journal_or_exit,
    parse_day,
    parse_month,
)


@click.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Display overall trading statistics.

    \b
    Examples:
      mt5journal stats
    """
    journal = load_journal_or_exit(get_data_store(ctx))
    s = journal.statistics

    stats_text = (
        f"[bold]Trading Statistics[/bold]\n\n"
        f"Total P&L:     {format_money(s.total_profit)}\n"
        f"Trades:        {s.total_trades}\n"
        f"Wins / Losses: [green]{s.winning_trades}[/green] / [red]{s.losing_trades}[/red]\n"
        f"Win Rate:      {s.win_rate:.1f}%\n"
        f"{'─' * 30}\n"
        f"Average Win:   {format_money(s.average_win)}\n"
        f"Average Loss:  {format_money(s.average_loss)}\n"
        f"Largest Win:   {format_money(s.largest_win)}\n"
        f"Largest Loss:  {format_money(s.largest_loss)}"
    )

    console.print(Panel(
        stats_text,
        title="[bold cyan]Statistics[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.option("--month", type=str, default=None, help="Only show this month (YYYY-MM).")
@click.pass_context
def days(ctx: click.Context, month: Optional[str]) -> None:
    """List trading days with P&L and notes.

    \b
    Examples:
      mt5journal days
      mt5journal days --month 2024-01
    """
    month_filter = parse_month(month)
    journal = load_journal_or_exit(get_data_store(ctx))

    dates = journal.sorted_dates(reverse=True)
    if month_filter is not None:
        prefix = f"{month_filter[0]:04d}-{month_filter[1]:02d}-"
        dates = [d for d in dates if d.startswith(prefix)]

    if not dates:
        console.print(Panel(
            "[dim]No trading days found[/dim]",
            title="[bold]Trading Days[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title="Trading Days",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Date", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("P&L", justify="right")
    table.add_column("Notes", max_width=30)

    total_profit = 0.0

    for day_date in dates:
        day = journal.days[day_date]
        notes = day.observations
        table.add_row(
            day.date,
            str(day.trade_count),
            format_money(day.total_profit),
            (notes[:27] + "...") if len(notes) > 30 else (notes or "-"),
        )
        total_profit += day.total_profit

    console.print(table)
    console.print(f"\n[bold]Total P&L:[/bold] {format_money(total_profit)}")


@click.command()
@click.argument("day_date", metavar="DATE")
@click.pass_context
def day(ctx: click.Context, day_date: str) -> None:
    """Show the trades closed on DATE (YYYY-MM-DD).

    \b
    Examples:
      mt5journal day 2024-01-15
    """
    day_date = parse_day(day_date)
    journal = load_journal_or_exit(get_data_store(ctx))

    day_journal = journal.get_day(day_date)
    if day_journal is None:
        console.print(f"[dim]No trades closed on {day_date}[/dim]")
        return

    table = Table(
        title=f"Trades on {day_date}",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Symbol", style="bold")
    table.add_column("Type", justify="center")
    table.add_column("Open", style="dim")
    table.add_column("Close", style="dim")
    table.add_column("Volume", justify="right")
    table.add_column("Open Price", justify="right")
    table.add_column("Close Price", justify="right")
    table.add_column("Costs", justify="right")
    table.add_column("Profit", justify="right")

    for trade in day_journal.trades:
        type_color = "green" if trade.type == "buy" else "red"
        table.add_row(
            trade.symbol or "-",
            f"[{type_color}]{trade.type.upper()}[/{type_color}]",
            trade.open_time.strftime("%Y-%m-%d %H:%M"),
            trade.close_time.strftime("%H:%M"),
            f"{trade.volume:g}",
            f"{trade.open_price:g}",
            f"{trade.close_price:g}",
            f"{trade.commission + trade.swap:.2f}",
            format_money(trade.profit),
        )

    console.print(table)
    console.print(
        f"\n[bold]Trades:[/bold] {day_journal.trade_count}  "
        f"[bold]P&L:[/bold] {format_money(day_journal.total_profit)}"
    )
    if day_journal.observations:
        console.print(Panel(
            day_journal.observations,
            title="[bold]Observations[/bold]",
            border_style="dim",
        ))


@click.command()
@click.argument("day_date", metavar="DATE")
@click.argument("text")
@click.pass_context
def note(ctx: click.Context, day_date: str, text: str) -> None:
    """Set the observations for trading day DATE.

    \b
    Examples:
      mt5journal note 2024-01-15 "Chased the breakout, stick to the plan"
    """
    day_date = parse_day(day_date)
    store = get_data_store(ctx)

    if not store.update_observations(day_date, text):
        error_panel(
            f"[red]No trading day {day_date} in the journal.[/red]\n\n"
            "Observations can only be attached to days with trades."
        )
        raise SystemExit(1)

    console.print(f"[green]Observations saved for {day_date}[/green]")
