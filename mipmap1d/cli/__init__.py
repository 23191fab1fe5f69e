"""
Command-line interface for mipmap1d.

This module provides the main entry point for the mipmap1d CLI.
"""

import click
import importlib
import logging
import pkgutil
from pathlib import Path

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# Create the main Click group
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mipmap1d")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Multi-resolution pyramids of one-dimensional series."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper()
    logging.basicConfig(level=getattr(logging, log_level.upper()))


def register_commands() -> None:
    """Dynamically discover and register all command modules."""
    commands_pkg = Path(__file__).parent / "commands"

    for _, module_name, _ in pkgutil.iter_modules([str(commands_pkg)]):
        module = importlib.import_module(f"mipmap1d.cli.commands.{module_name}")

        # Look for register_*_commands functions and call them
        for name, func in module.__dict__.items():
            if name.startswith("register_") and name.endswith("_commands"):
                func(cli)


register_commands()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
