"""Click CLI entry point for durationkit."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from durationkit import __version__
from durationkit.config import CONFIG_FILENAME, load_config
from durationkit.errors import DurationError
from durationkit.utils.logging import console, err_console, get_logger, setup_logging

log = get_logger(__name__)


def _fail(error: Exception) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="durationkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(exists=False),
    default=None,
    help=f"Path to {CONFIG_FILENAME}",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """durationkit - convert between duration strings and seconds."""
    setup_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)


@cli.command()
@click.argument("text")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Reject unknown units instead of skipping them",
)
@click.pass_context
def parse(ctx: click.Context, text: str, strict: bool | None) -> None:
    """Parse a duration string such as '2h 30m' into seconds."""
    from durationkit.parser import parse as do_parse

    config = ctx.obj["config"]
    if strict is None:
        strict = config.parse.strict
    try:
        seconds = do_parse(text, strict=strict)
    except DurationError as e:
        _fail(e)
    console.print(str(seconds), highlight=False)


@cli.command("format")
@click.argument("seconds", type=int)
@click.option(
    "--short/--long",
    default=None,
    help="Abbreviated (2h 30m) or full (2 hours 30 minutes) unit names",
)
@click.option(
    "-u", "--unit", "units",
    multiple=True,
    help="Unit to include (repeatable), e.g. -u h -u m",
)
@click.pass_context
def format_(
    ctx: click.Context,
    seconds: int,
    short: bool | None,
    units: tuple[str, ...],
) -> None:
    """Format SECONDS as a human-readable duration."""
    from durationkit.formatter import format_duration

    config = ctx.obj["config"]
    if short is None:
        short = config.format.short
    selected = list(units) if units else config.format.units
    log.debug("Formatting %d with units %s", seconds, selected)
    try:
        text = format_duration(seconds, short, selected)
    except DurationError as e:
        _fail(e)
    console.print(text, highlight=False)


@cli.command()
@click.argument("seconds", type=int)
def hhmm(seconds: int) -> None:
    """Format SECONDS as HH:MM."""
    from durationkit.formatter import to_hhmm

    console.print(to_hhmm(seconds), highlight=False)


@cli.command()
@click.argument("seconds", type=click.IntRange(min=0))
@click.option("--iso", is_flag=True, help="Print an ISO-8601 duration instead of JSON")
def interval(seconds: int, iso: bool) -> None:
    """Break SECONDS down into calendar years, months, days and time."""
    from durationkit.interval import to_interval

    try:
        result = to_interval(seconds)
    except DurationError as e:
        _fail(e)
    if iso:
        console.print(result.isoformat(), highlight=False)
    else:
        console.print_json(result.model_dump_json())


@cli.command("seconds")
@click.option("--years", type=click.IntRange(min=0), default=0)
@click.option("--months", type=click.IntRange(min=0), default=0)
@click.option("--days", type=click.IntRange(min=0), default=0)
@click.option("--hours", type=click.IntRange(min=0), default=0)
@click.option("--minutes", type=click.IntRange(min=0), default=0)
@click.option("--seconds", "secs", type=click.IntRange(min=0), default=0)
def seconds_(
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    secs: int,
) -> None:
    """Convert a calendar interval to seconds."""
    from durationkit.interval import CalendarInterval, to_seconds

    value = CalendarInterval(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=secs,
    )
    try:
        total = to_seconds(value)
    except DurationError as e:
        _fail(e)
    console.print(str(total), highlight=False)


@cli.command()
@click.option(
    "-o", "--output", "output_path",
    type=click.Path(),
    default=CONFIG_FILENAME,
    help="Output path for the config file",
)
def init(output_path: str) -> None:
    """Generate a starter duration_config.yaml."""
    import yaml

    from durationkit.config import DurationConfig

    out = Path(output_path)
    if out.exists():
        if not click.confirm(f"{out} already exists. Overwrite?"):
            raise SystemExit(0)

    data = DurationConfig().model_dump()
    out.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False),
        encoding="utf-8",
    )
    console.print(f"[green]Config written to {out}[/green]")
