"""CLI entrypoint for earth-geo."""

from __future__ import annotations

import logging
import math

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from earth_geo.dms import format_dms, from_dms
from earth_geo.geo import distance, max_comm_radius, max_line_of_sight
from earth_geo.point import DEFAULT_GROUND_POINT, GeoPoint, InvalidPointError

console = Console(highlight=False)
err_console = Console(stderr=True)

LOG_FORMAT = "%(name)s | %(message)s"

# Lets negative numbers such as "-120.5,35" through as arguments
NUMERIC_ARGS = {"ignore_unknown_options": True}


class PointType(click.ParamType):
    """Click parameter accepting ``lon,lat`` or ``lon,lat,alt``."""

    name = "point"

    def convert(self, value, param, ctx):
        if isinstance(value, GeoPoint):
            return value
        try:
            return GeoPoint.parse(value)
        except InvalidPointError as exc:
            self.fail("; ".join(exc.errors), param, ctx)


POINT = PointType()


def setup_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger."""
    logger = logging.getLogger("earth_geo")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not logger.handlers:
        handler = RichHandler(console=err_console, show_path=False)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def _km(value: float) -> str:
    return f"{value:.3f} km"


def _dms(value: float, precision: int) -> str:
    # int() of NaN/inf raises, so the table shows a placeholder instead
    return format_dms(value, precision) if math.isfinite(value) else "n/a"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool):
    """Earth Geo — spherical-Earth distances, radio horizons and DMS angles."""
    setup_logging(verbose)


@cli.command(context_settings=NUMERIC_ARGS)
@click.argument("where", type=POINT)
@click.option("--precision", default=2, type=click.IntRange(min=0), help="Fractional digits for DMS seconds.")
@click.option("--json", "as_json", is_flag=True, help="Print the point as JSON.")
def point(where: GeoPoint, precision: int, as_json: bool):
    """Show a point's Cartesian projection and DMS rendering."""
    if as_json:
        click.echo(where.to_json())
        return

    for problem in where.validate():
        console.print(f"[yellow]warning:[/] {escape(problem)}")

    table = Table(title="Point")
    table.add_column("Field", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Longitude", f"{where.longitude:.6f}")
    table.add_row("Latitude", f"{where.latitude:.6f}")
    table.add_row("Altitude (km)", f"{where.altitude:.3f}")
    table.add_row("X (km)", f"{where.x:.3f}")
    table.add_row("Y (km)", f"{where.y:.3f}")
    table.add_row("Z (km)", f"{where.z:.3f}")
    table.add_row("Longitude DMS", _dms(where.longitude, precision))
    table.add_row("Latitude DMS", _dms(where.latitude, precision))

    console.print(table)


@cli.command("distance", context_settings=NUMERIC_ARGS)
@click.argument("a", type=POINT)
@click.argument("b", type=POINT)
def distance_cmd(a: GeoPoint, b: GeoPoint):
    """Straight-line (chord) distance between A and B."""
    click.echo(_km(distance(a, b)))


@cli.command("line-of-sight", context_settings=NUMERIC_ARGS)
@click.argument("a", type=POINT)
@click.argument("b", type=POINT)
def line_of_sight_cmd(a: GeoPoint, b: GeoPoint):
    """Maximum line-of-sight distance between observers at A and B."""
    click.echo(_km(max_line_of_sight(a, b)))


@cli.command("comm-radius", context_settings=NUMERIC_ARGS)
@click.argument("where", type=POINT)
@click.option("--signal-distance", required=True, type=float,
              help="Maximum straight-line signal distance (km).")
def comm_radius_cmd(where: GeoPoint, signal_distance: float):
    """Maximum communication radius of a station at WHERE."""
    table = Table(title=f"Communication radius (altitude {where.altitude:g} km)")
    table.add_column("Bound")
    table.add_column("Distance", justify="right")

    table.add_row("Horizon", _km(max_line_of_sight(where, DEFAULT_GROUND_POINT)))
    table.add_row("[bold]Radius[/]", f"[bold]{_km(max_comm_radius(where, signal_distance))}[/]")

    console.print(table)


@cli.command("to-dms", context_settings=NUMERIC_ARGS)
@click.argument("value", type=float)
@click.option("--precision", default=None, type=click.IntRange(min=0),
              help="Fractional digits for seconds (default: whole seconds).")
def to_dms_cmd(value: float, precision: int | None):
    """Render decimal degrees as degree/minute/second."""
    if not math.isfinite(value):
        raise click.BadParameter(f"{value} is not a finite angle", param_hint="'VALUE'")
    click.echo(format_dms(value, precision))


@cli.command("from-dms", context_settings=NUMERIC_ARGS)
@click.argument("degree", type=int)
@click.argument("minute", type=int)
@click.argument("second", type=int)
def from_dms_cmd(degree: int, minute: int, second: int):
    """Convert degree/minute/second to decimal degrees."""
    click.echo(repr(from_dms(degree, minute, second)))
