"""CLI entry point for julian."""

import logging
from typing import Optional

import click
import pytz

from .date import JulianDate
from .logging import get_logger, set_log_level
from .pythonic_datetimes import JulianError, MissingTimezoneError

logger = get_logger(__name__)


def configure_logging(quiet: bool, debug: bool, verbose: int) -> None:
    """
    Configure logging from command line flags.

    0 -> WARNING, 1 -> INFO, 2+ -> DEBUG; --debug forces DEBUG and --quiet
    wins over both with ERROR.
    """
    if quiet:
        log_level = logging.ERROR
    elif debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    set_log_level(log_level)
    logger.debug(f"Logging configured with level {logging.getLevelName(log_level)}")


def format_julian(jd: JulianDate, tz: Optional[str]) -> str:
    lines = [
        f"julian date:  {jd.day():.9f}",
        f"datetime:     {jd.to_datetime(tz).isoformat()}",
        f"day number:   {jd.day_number()}",
        f"day fraction: {jd.day_fraction():.9f}",
        f"unix:         {jd.unix()}",
        f"century:      {jd.century():.12f}",
    ]
    return "\n".join(lines)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Convert between calendar dates and Julian dates."""
    configure_logging(quiet=quiet, debug=debug, verbose=verbose)


@cli.command("from-calendar")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.argument("hour", type=int, required=False, default=0)
@click.argument("minute", type=int, required=False, default=0)
@click.argument("second", type=int, required=False, default=0)
@click.option("--nanosecond", type=int, default=0, help="Nanoseconds past the second")
@click.option("--tz", help="IANA timezone name, e.g. UTC or America/Los_Angeles")
def from_calendar(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanosecond: int,
    tz: Optional[str],
) -> None:
    """Print the Julian date of a wall-clock time in a timezone.

    Out-of-range fields are normalized, so month 13 is January of the next year.
    """
    try:
        jd = JulianDate.from_calendar(
            year, month, day, hour, minute, second, nanosecond, tz=tz
        )
    except MissingTimezoneError:
        raise click.BadParameter("a timezone is required", param_hint="--tz")
    except pytz.UnknownTimeZoneError:
        raise click.BadParameter(f"unknown timezone {tz!r}", param_hint="--tz")
    except (JulianError, ValueError, OverflowError) as e:
        raise click.ClickException(str(e))

    logger.info(f"{jd.to_datetime().isoformat()} -> {jd.day()}")
    click.echo(f"{jd.day():.9f}")


@cli.command("to-datetime")
@click.argument("julian_date", type=float)
@click.option("--tz", help="IANA timezone name for the printed datetime (default UTC)")
def to_datetime(julian_date: float, tz: Optional[str]) -> None:
    """Print the instant and derived values of a Julian date."""
    jd = JulianDate(julian_date)
    try:
        click.echo(format_julian(jd, tz))
    except pytz.UnknownTimeZoneError:
        raise click.BadParameter(f"unknown timezone {tz!r}", param_hint="--tz")
    except (ValueError, OverflowError) as e:
        raise click.ClickException(f"{julian_date} is outside the datetime range: {e}")


@cli.command()
def now() -> None:
    """Print the current Julian date."""
    click.echo(f"{JulianDate.now().day():.9f}")


if __name__ == "__main__":
    cli()
