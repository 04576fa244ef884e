"""The JulianDate value type.

The Julian date is the continuous count of days since the beginning of the
Julian Period, noon Universal Time on January 1, 4713 BC. The integer part
counts days and the fractional part counts the time since the preceding noon
UTC. January 1, 2000 at noon UTC is 2451545.0 and six hours later is
2451545.25.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

import numpy as np

from .constants import (
    DAYS_PER_CENTURY,
    J2000_EPOCH,
    JULIAN_UNIX_EPOCH,
    NANOSECONDS_PER_DAY,
    SECONDS_PER_DAY,
)
from .pythonic_datetimes import (
    TimezoneLike,
    datetime64_from_unix_nanoseconds,
    datetime64_to_unix_nanoseconds,
    datetime_from_unix_nanoseconds,
    localize,
    normalize_wall_clock,
    resolve_timezone,
    unix_nanoseconds,
)


class JulianDate(float):
    """A Julian date, stored as days since the Julian Period epoch.

    JulianDate is an immutable float, so it compares, orders and hashes like
    the number it holds. Arithmetic on it gives plain floats back.

    Conversions go through a nanosecond count since the Unix epoch. Any of
    them is unspecified for dates that do not fit in a signed 64-bit
    nanosecond counter, roughly before 1678 or after 2262.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"JulianDate({float(self)!r})"

    def __str__(self) -> str:
        return float.__repr__(self)

    @classmethod
    def from_unix_nanoseconds(cls, nanoseconds: int) -> "JulianDate":
        """Julian date for a count of nanoseconds since the Unix epoch."""
        return cls(nanoseconds / NANOSECONDS_PER_DAY + JULIAN_UNIX_EPOCH)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "JulianDate":
        """Julian date for a timezone-aware datetime.

        Args:
            dt: Datetime to convert

        Returns:
            JulianDate: The Julian date of the instant

        Raises:
            NaiveDateTimeError: If dt has no timezone
        """
        return cls.from_unix_nanoseconds(unix_nanoseconds(dt))

    @classmethod
    def from_datetime64(cls, value: np.datetime64) -> "JulianDate":
        """Julian date for a numpy datetime64, keeping nanosecond precision.

        numpy datetimes have no timezone and are read as UTC.
        """
        return cls.from_unix_nanoseconds(datetime64_to_unix_nanoseconds(value))

    @classmethod
    def from_calendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        tz: Optional[TimezoneLike] = None,
    ) -> "JulianDate":
        """Julian date for yyyy-mm-dd hh:mm:ss + nanosecond in the given timezone.

        The month, day, hour, minute, second and nanosecond values may be
        outside their usual ranges and are normalized during the conversion.
        For example, October 32 converts to November 1.

        A daylight saving transition skips or repeats wall times. In the
        United States, March 13, 2011 2:15am never occurred, while November 6,
        2011 1:15am occurred twice. For such times the offset is not
        well-defined: the result is correct in one of the two offsets involved
        in the transition, with no guarantee of which.

        Args:
            year: Year
            month: Month, 1-12 before normalization
            day: Day of month
            hour: Hour
            minute: Minute
            second: Second
            nanosecond: Nanosecond
            tz: A tzinfo or an IANA zone name; required

        Returns:
            JulianDate: The Julian date of the wall time in tz

        Raises:
            MissingTimezoneError: If tz is None
        """
        zone = resolve_timezone(tz)
        wall, extra_nanoseconds = normalize_wall_clock(
            year, month, day, hour, minute, second, nanosecond
        )
        nanoseconds = unix_nanoseconds(localize(wall, zone)) + extra_nanoseconds
        return cls.from_unix_nanoseconds(nanoseconds)

    @classmethod
    def now(cls) -> "JulianDate":
        """Julian date of the current instant."""
        return cls.from_datetime(datetime.now(timezone.utc))

    def to_datetime(self, tz: Optional[TimezoneLike] = None) -> datetime:
        """The instant as a datetime, in UTC unless tz is given.

        datetime resolves microseconds, so the result is rounded to the
        nearest one.

        Raises:
            OverflowError: If the instant falls outside datetime's years 1-9999
        """
        return datetime_from_unix_nanoseconds(self.unix_nanoseconds(), tz)

    def to_datetime64(self) -> np.datetime64:
        """The instant as a nanosecond numpy datetime64.

        Outside roughly 1678-2262 the nanosecond count wraps like an int64
        overflow, so the result is an unspecified instant rather than an error.
        """
        return datetime64_from_unix_nanoseconds(self.unix_nanoseconds())

    def unix(self) -> int:
        """Seconds since the Unix epoch, truncated toward zero."""
        return int((self - JULIAN_UNIX_EPOCH) * SECONDS_PER_DAY)

    def unix_nanoseconds(self) -> int:
        """Nanoseconds since January 1, 1970 UTC, truncated toward zero.

        The value is unspecified if it cannot be represented by a signed
        64-bit integer, a date before the year 1678 or after 2262.
        """
        return int((self - JULIAN_UNIX_EPOCH) * NANOSECONDS_PER_DAY)

    def day_fraction(self) -> float:
        """Fraction of a day since the preceding noon UTC, in [0, 1)."""
        fraction = float(self) % 1.0
        # x % 1.0 rounds up to 1.0 for tiny negative x
        if fraction >= 1.0:
            return 0.0
        return fraction

    def day_fraction_duration(self) -> timedelta:
        """Time since the preceding noon UTC as a timedelta."""
        return timedelta(
            microseconds=self.day_fraction() * NANOSECONDS_PER_DAY / 1000
        )

    def day(self) -> float:
        return float(self)

    def day_number(self) -> int:
        """The integer Julian day number."""
        return math.floor(self)

    def parts(self) -> Tuple[int, float]:
        """The day number and day fraction."""
        return self.day_number(), self.day_fraction()

    def century(self) -> float:
        """Julian centuries since J2000.0."""
        return (float(self) - J2000_EPOCH) / DAYS_PER_CENTURY
