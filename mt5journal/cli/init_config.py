"""Configuration command for MT5 Journal CLI."""

import click
from rich.panel import Panel

from mt5journal.cli.common import console
from mt5journal.config import create_template_config, get_config_path


@click.command()
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Create a config file with default settings.

    \b
    Examples:
      mt5journal init
      mt5journal init --force
    """
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists:[/yellow] {config_path}\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Config[/bold yellow]",
            border_style="yellow",
        ))
        return

    path = create_template_config(config_path)
    console.print(Panel(
        f"[green]Config written to[/green] {path}",
        title="[bold cyan]Config[/bold cyan]",
        border_style="cyan",
    ))
