"""Import and export commands for MT5 Journal CLI."""

from datetime import date
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel

from mt5journal.cli.common import (
    console,
    error_panel,
    format_money,
    get_data_store,
    load_journal_or_exit,
)
from mt5journal.engine import parse_mt5_report, serialize
from mt5journal.errors import FormatError
from mt5journal.models import ImportReport

# Warnings listed individually before they are summarized
MAX_LISTED_WARNINGS = 5


def _report_lines(report: ImportReport) -> list[str]:
    lines = [
        f"Rows read:        {report.rows_total}",
        f"Opens / Closes:   {report.opens} / {report.closes}",
    ]
    if report.rows_skipped:
        lines.append(f"[yellow]Rows skipped:     {report.rows_skipped}[/yellow]")
    if report.unmatched_closes:
        lines.append(f"[yellow]Unmatched closes: {report.unmatched_closes}[/yellow]")
    if report.replaced_opens:
        lines.append(f"[yellow]Replaced opens:   {report.replaced_opens}[/yellow]")
    if report.over_closes:
        lines.append(f"[yellow]Over-closes:      {report.over_closes}[/yellow]")
    if report.open_positions:
        lines.append(f"[dim]Still open:       {report.open_positions}[/dim]")

    for warning in report.warnings[:MAX_LISTED_WARNINGS]:
        lines.append(f"[dim]- {warning}[/dim]")
    hidden = len(report.warnings) - MAX_LISTED_WARNINGS
    if hidden > 0:
        lines.append(f"[dim]... and {hidden} more (use --verbose)[/dim]")
    return lines


@click.command(name="import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--keep-notes",
    is_flag=True,
    default=False,
    help="Keep observations for days present in the new import.",
)
@click.pass_context
def import_(ctx: click.Context, file: Path, keep_notes: bool) -> None:
    """Import an MT5 deals report (CSV), replacing the current journal.

    The delimiter (comma, semicolon or tab) is detected from the header.

    \b
    Examples:
      mt5journal import ReportHistory.csv
      mt5journal import ReportHistory.csv --keep-notes
    """
    try:
        text = file.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        error_panel(f"[red]Could not read {file}:[/red]\n\n{e}")
        raise SystemExit(1)

    try:
        result = parse_mt5_report(text)
    except FormatError as e:
        error_panel(f"[red]Import failed:[/red]\n\n{e}", title="File not recognized")
        raise SystemExit(1)

    journal = result.journal
    store = get_data_store(ctx)

    if keep_notes:
        for day_date, observations in store.get_observations().items():
            if day_date in journal.days:
                journal.update_observations(day_date, observations)

    store.save_journal(journal)

    stats = journal.statistics
    dates = journal.sorted_dates()
    summary = [
        f"[bold]Imported {stats.total_trades} trades[/bold] from {file.name}\n",
        f"Trading days:     {len(dates)} ({dates[0]} to {dates[-1]})",
        f"Total P&L:        {format_money(stats.total_profit)}",
        f"Win rate:         {stats.win_rate:.1f}%\n",
    ]
    summary.extend(_report_lines(result.report))

    console.print(Panel(
        "\n".join(summary),
        title="[bold cyan]Import[/bold cyan]",
        border_style="yellow" if result.report.has_issues else "cyan",
    ))


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file. Defaults to trading_journal_export_<date>.csv.",
)
@click.pass_context
def export(ctx: click.Context, output: Optional[Path]) -> None:
    """Export the journal to CSV.

    \b
    Examples:
      mt5journal export
      mt5journal export -o journal.csv
    """
    store = get_data_store(ctx)
    journal = load_journal_or_exit(store)

    if output is None:
        export_dir = Path(ctx.obj["config"]["journal"]["export_dir"]).expanduser()
        output = export_dir / f"trading_journal_export_{date.today().isoformat()}.csv"

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(serialize(journal), encoding="utf-8")
    except OSError as e:
        error_panel(f"[red]Could not write {output}:[/red]\n\n{e}")
        raise SystemExit(1)

    console.print(
        f"[green]Exported {journal.statistics.total_trades} trades to[/green] {output}"
    )
