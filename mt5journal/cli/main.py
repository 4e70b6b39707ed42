"""Main CLI entry point for MT5 Journal.

This module provides the main click group and lazy loading
for command modules.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from mt5journal.config import load_config
from mt5journal.errors import ConfigError

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when a command is invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        # Commands are looked up by click name, which may differ from the
        # attribute name (e.g. "import" is defined as import_)
        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "init": "mt5journal.cli.init_config",
    "import": "mt5journal.cli.transfer",
    "export": "mt5journal.cli.transfer",
    "stats": "mt5journal.cli.journal",
    "days": "mt5journal.cli.journal",
    "day": "mt5journal.cli.journal",
    "note": "mt5journal.cli.journal",
    "calendar": "mt5journal.cli.views",
    "analysis": "mt5journal.cli.views",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="mt5journal")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug diagnostics.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """MT5 Journal - trading journal for MetaTrader 5 deal reports.

    Import a deals report exported from MetaTrader 5, then review daily
    P&L, statistics and trading patterns.

    \b
    Quick Start:
      mt5journal import deals.csv   # Import a report
      mt5journal stats              # Overall statistics
      mt5journal calendar           # Month view
    """
    ctx.ensure_object(dict)

    try:
        config = load_config()
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    setup_logging("DEBUG" if verbose else config["logging"]["level"])
    ctx.obj["config"] = config


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
