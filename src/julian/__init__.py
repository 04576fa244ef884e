"""Conversions between calendar timestamps and Julian dates."""

from .constants import (
    DAYS_PER_CENTURY,
    J2000_EPOCH,
    JULIAN_UNIX_EPOCH,
    NANOSECONDS_PER_DAY,
    SECONDS_PER_DAY,
    UNIX_EPOCH,
)
from .date import JulianDate
from .julian import (
    datetime_from_julian,
    julian_from_datetime,
    julian_to_datetime,
    julian_to_julian_parts,
)
from .pythonic_datetimes import JulianError, MissingTimezoneError, NaiveDateTimeError

__all__ = [
    "DAYS_PER_CENTURY",
    "J2000_EPOCH",
    "JULIAN_UNIX_EPOCH",
    "NANOSECONDS_PER_DAY",
    "SECONDS_PER_DAY",
    "UNIX_EPOCH",
    "JulianDate",
    "JulianError",
    "MissingTimezoneError",
    "NaiveDateTimeError",
    "datetime_from_julian",
    "julian_from_datetime",
    "julian_to_datetime",
    "julian_to_julian_parts",
]
