"""YAML-driven CLI commands."""

import logging
import sys
from pathlib import Path

import click
import yaml

from mipmap1d.config import MipMapConfig
from mipmap1d.core import MipMap1D
from mipmap1d.io_adapters import load_series
from mipmap1d.cli.commands.levels import echo_pyramid

logger = logging.getLogger(__name__)


def register_pipeline_commands(cli: click.Group) -> None:
    """Register configuration-driven commands."""
    @cli.command("run", help="Build a pyramid from a YAML configuration")
    @click.argument("config", type=click.Path(exists=True, dir_okay=False, path_type=Path))
    @click.option(
        "--validate-only",
        is_flag=True,
        help="Only validate configuration, don't build the pyramid"
    )
    @click.option("--values", "show_values", is_flag=True, help="Print the values of every level")
    def run(config: Path, validate_only: bool, show_values: bool):
        """Build a pyramid as described by a YAML configuration file.

        Examples:

        \b
            mipmap1d run configs/load.yaml
            mipmap1d run configs/load.yaml --validate-only
        """
        try:
            cfg = MipMapConfig.from_yaml(config)
        except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
            click.echo(f"Configuration error: {e}", err=True)
            sys.exit(1)

        if validate_only:
            click.echo(f"Configuration valid: {config}")
            click.echo(f"  Dataset: {cfg.dataset.path}")
            click.echo(f"  Column: {cfg.dataset.value_col or 'first numeric'}")
            if cfg.pyramid.max_points is not None:
                click.echo(f"  Max points: {cfg.pyramid.max_points}")
            return

        cfg.logging.apply()
        path = Path(cfg.dataset.path)
        if not path.is_absolute():
            path = config.parent / path
        logger.info(f"Running configuration {config}")

        try:
            values = load_series(path, value_col=cfg.dataset.value_col, time_col=cfg.dataset.time_col)
            mipmap = MipMap1D(values)
        except (FileNotFoundError, KeyError, ValueError, TypeError, OverflowError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        echo_pyramid(mipmap, show_values=show_values, max_points=cfg.pyramid.max_points)
