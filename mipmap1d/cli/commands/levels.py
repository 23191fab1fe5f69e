"""Pyramid inspection CLI commands."""

import sys
from pathlib import Path
from typing import Optional

import click
import numpy as np

from mipmap1d.core import MipMap1D
from mipmap1d.io_adapters import load_series


def echo_pyramid(mipmap: MipMap1D, show_values: bool = False, max_points: Optional[int] = None) -> None:
    """Print one line per level, and the zoom level for ``max_points`` if given."""
    click.echo(f"{mipmap.source_length} points, {mipmap.num_levels()} levels ({mipmap.dtype})")
    for index, values in enumerate(mipmap):
        click.echo(f"level {index}: {len(values)} points")
        if show_values:
            click.echo("  " + np.array2string(values, separator=", ", threshold=sys.maxsize))
    if max_points is not None:
        click.echo(f"level for {max_points} points: {mipmap.level_for_length(max_points)}")


def register_levels_commands(cli: click.Group) -> None:
    """Register pyramid inspection commands."""
    @cli.command("levels", help="Build a pyramid from a CSV series and list its levels")
    @click.argument("series", type=click.Path(exists=True, dir_okay=False, path_type=Path))
    @click.option("--column", "-c", default=None, help="Value column (default: first numeric column)")
    @click.option("--time-column", "-t", default=None, help="Column to sort rows by")
    @click.option("--values", "show_values", is_flag=True, help="Print the values of every level")
    @click.option(
        "--max-points",
        type=click.IntRange(min=1),
        default=None,
        help="Report the finest level with at most this many points",
    )
    def levels(series: Path, column: Optional[str], time_column: Optional[str],
               show_values: bool, max_points: Optional[int]):
        """Build a pyramid from SERIES and list its levels.

        Examples:

        \b
            mipmap1d levels load.csv --column kw
            mipmap1d levels load.csv --max-points 500
        """
        try:
            values = load_series(series, value_col=column, time_col=time_column)
            mipmap = MipMap1D(values)
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        echo_pyramid(mipmap, show_values=show_values, max_points=max_points)
