"""Command-line entry point: run one catalog query and print the events."""

from __future__ import annotations

import logging
from datetime import datetime

import click
from rich.console import Console
from rich.table import Table

from quake_query.config import ClientConfig
from quake_query.errors import QuakeQueryError
from quake_query.logging_config import configure_logging
from quake_query.models import Event, EventSet
from quake_query.query import AlertLevel, OrderBy
from quake_query.usgs_client import UsgsClient

console = Console()

_TIME_FORMATS = ["%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M", "%Y-%m-%d"]


def _components(dt: datetime) -> tuple[int, int, int, int, int]:
    return dt.year, dt.month, dt.day, dt.hour, dt.minute


@click.command()
@click.option("--country", default="US", show_default=True,
              help="ISO alpha-2 country code; pass '' to disable the country filter.")
@click.option("--start", type=click.DateTime(formats=_TIME_FORMATS), default=None,
              help="Window start, local time.")
@click.option("--end", type=click.DateTime(formats=_TIME_FORMATS), default=None,
              help="Window end, local time. Defaults to now.")
@click.option("--min-mag", type=float, default=0.0, show_default=True)
@click.option("--max-mag", type=float, default=10.0, show_default=True)
@click.option("--alert", type=click.Choice([a.value for a in AlertLevel]),
              default=AlertLevel.ALL.value, show_default=True)
@click.option("--order", type=click.Choice([o.value for o in OrderBy]),
              default=OrderBy.TIME.value, show_default=True)
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
              default="WARNING", show_default=True)
def main(country, start, end, min_mag, max_mag, alert, order, log_level):
    """Query the USGS catalog and list earthquakes inside a country."""
    configure_logging(getattr(logging, log_level))

    client = UsgsClient(ClientConfig.from_env())
    query = (
        client.query()
        .filter_by_country_code(country)
        .with_min_magnitude(min_mag)
        .with_max_magnitude(max_mag)
        .with_alert_level(AlertLevel(alert))
        .with_order_by(OrderBy(order))
    )
    if start is not None:
        query.with_start_time(*_components(start))
    if end is not None:
        query.with_end_time(*_components(end))

    try:
        result = query.fetch()
    except QuakeQueryError as exc:
        raise click.ClickException(str(exc)) from exc

    _print_events(result)


def _magnitude_color(mag: float | None) -> str:
    if mag is None:
        return "white"
    return "red" if mag >= 5.0 else "yellow" if mag >= 3.0 else "green"


def _event_row(event: Event) -> list[str]:
    origin = event.properties.origin_time
    mag = event.magnitude
    color = _magnitude_color(mag)
    return [
        f"{origin:%Y-%m-%d %H:%M} UTC" if origin else "-",
        f"[bold {color}]M{mag:.1f}[/]" if mag is not None else "-",
        event.properties.place or "Unknown",
        f"{event.depth:.1f}" if event.depth is not None else "-",
        event.properties.alert or "-",
        event.id,
    ]


def _print_events(result: EventSet) -> None:
    table = Table(title=f"{result.metadata.count} earthquake(s)")
    for column in ("Time", "Mag", "Place", "Depth (km)", "Alert", "ID"):
        table.add_column(column)
    for event in result.features:
        table.add_row(*_event_row(event))
    console.print(table)


if __name__ == "__main__":
    main()
