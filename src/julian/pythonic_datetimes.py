"""Calendar and timezone helpers built on datetime, pytz and numpy.

Everything that knows about wall clocks, timezones or instant types lives
here. The Julian date code only ever sees integer nanoseconds since the
Unix epoch.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple, Union

import numpy as np
import pytz

from .constants import UNIX_EPOCH
from .logging import get_logger

logger = get_logger(__name__)

TimezoneLike = Union[tzinfo, str]

_ONE_MICROSECOND = timedelta(microseconds=1)
_INT64_SPAN = 2**64


class JulianError(Exception):
    """Base class for errors raised by the julian package."""

    pass


class NaiveDateTimeError(JulianError, ValueError):
    """Raised when a datetime object has no timezone info."""

    pass


class MissingTimezoneError(JulianError, ValueError):
    """Raised when calendar fields are given without a timezone."""

    pass


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


def resolve_timezone(tz: Optional[TimezoneLike]) -> tzinfo:
    """Turn a timezone argument into a tzinfo.

    Args:
        tz: A tzinfo instance, or an IANA zone name such as "America/Los_Angeles"

    Returns:
        tzinfo: The resolved timezone

    Raises:
        MissingTimezoneError: If tz is None
        pytz.UnknownTimeZoneError: If tz names a zone pytz does not know
        TypeError: If tz is neither a string nor a tzinfo
    """
    if tz is None:
        raise MissingTimezoneError("A timezone is required")
    if isinstance(tz, str):
        return pytz.timezone(tz)
    if isinstance(tz, tzinfo):
        return tz
    raise TypeError(f"Expected a tzinfo or zone name, got {type(tz).__name__}")


def normalize_wall_clock(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
) -> Tuple[datetime, int]:
    """Build a naive wall-clock datetime from fields that may be out of range.

    Overflow rolls into the next larger field, so month 13 is January of the
    following year and October 32 is November 1. Negative values roll
    backwards the same way.

    Returns:
        Tuple[datetime, int]: The naive datetime and the nanoseconds (0-999)
        below its microsecond resolution
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    microsecond, nanosecond = divmod(nanosecond, 1000)

    wall = datetime(year, month, 1) + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        microseconds=microsecond,
    )
    return wall, nanosecond


def localize(wall: datetime, tz: tzinfo) -> datetime:
    """Place a naive wall-clock time in a timezone.

    A wall time skipped or repeated by a daylight saving transition does not
    raise. The result is correct in one of the two offsets involved in the
    transition, with no guarantee of which.

    Args:
        wall: Naive datetime
        tz: Target timezone

    Returns:
        datetime: Timezone-aware datetime
    """
    if hasattr(tz, "localize"):
        try:
            return tz.localize(wall, is_dst=None)
        except pytz.exceptions.InvalidTimeError as e:
            logger.debug(f"{wall} is not a unique time in {tz}: {type(e).__name__}")
            return tz.localize(wall, is_dst=False)

    aware = wall.replace(tzinfo=tz)
    if aware.utcoffset() != aware.replace(fold=1).utcoffset():
        logger.debug(f"{wall} is not a unique time in {tz}")
    return aware


def unix_nanoseconds(dt: datetime) -> int:
    """Nanoseconds between the Unix epoch and a timezone-aware datetime.

    Raises:
        NaiveDateTimeError: If dt is naive
    """
    elapsed = ensure_utc(dt) - UNIX_EPOCH
    return (elapsed // _ONE_MICROSECOND) * 1000


def datetime64_to_unix_nanoseconds(value: np.datetime64) -> int:
    """Nanoseconds since the Unix epoch for a numpy datetime64.

    Raises:
        ValueError: If value is NaT
    """
    value = np.datetime64(value, "ns")
    if np.isnat(value):
        raise ValueError("Cannot convert NaT to an instant")
    return int(value.astype(np.int64))


def datetime_from_unix_nanoseconds(
    nanoseconds: int, tz: Optional[TimezoneLike] = None
) -> datetime:
    """Rebuild a datetime from nanoseconds since the Unix epoch.

    The result is rounded to the nearest microsecond, the resolution of
    datetime.

    Args:
        nanoseconds: Nanoseconds since 1970-01-01T00:00:00 UTC
        tz: Optional timezone for the result; UTC when omitted

    Returns:
        datetime: Timezone-aware datetime

    Raises:
        OverflowError: If the instant falls outside datetime's years 1-9999
    """
    dt = UNIX_EPOCH + timedelta(microseconds=(nanoseconds + 500) // 1000)
    if tz is not None:
        dt = dt.astimezone(resolve_timezone(tz))
    return dt


def datetime64_from_unix_nanoseconds(nanoseconds: int) -> np.datetime64:
    """Rebuild a nanosecond numpy datetime64 from nanoseconds since the Unix epoch.

    Counts that do not fit a signed 64-bit integer, dates before 1678 or
    after 2262, wrap around like an int64 overflow. The result for them is a
    meaningless instant (possibly NaT), never an error.
    """
    wrapped = ((nanoseconds + _INT64_SPAN // 2) % _INT64_SPAN) - _INT64_SPAN // 2
    return np.datetime64(wrapped, "ns")
