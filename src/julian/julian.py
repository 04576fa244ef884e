"""Functional helpers over JulianDate for code that passes plain floats around."""

from datetime import datetime
from typing import Tuple

from .constants import JD_PRECISION
from .date import JulianDate


def julian_from_datetime(dt: datetime) -> float:
    """Convert datetime to Julian date.

    Args:
        dt: Timezone-aware datetime to convert

    Returns:
        float: Julian date

    Raises:
        NaiveDateTimeError: If dt has no timezone
    """
    return JulianDate.from_datetime(dt).day()


def julian_to_datetime(jd: float) -> datetime:
    """Convert Julian date to a UTC datetime.

    Args:
        jd: Julian date to convert

    Returns:
        datetime: UTC datetime, rounded to the microsecond
    """
    return JulianDate(jd).to_datetime()


# Alias for julian_to_datetime
datetime_from_julian = julian_to_datetime


def julian_to_julian_parts(jd: float) -> Tuple[int, float]:
    """Split Julian date into integer and fractional parts.

    Args:
        jd: Julian date to split

    Returns:
        Tuple[int, float]: Day number and day fraction, the fraction rounded
        to JD_PRECISION places and always below 1
    """
    jd_int, jd_frac = JulianDate(jd).parts()
    jd_frac = round(jd_frac, JD_PRECISION)
    # rounding up to a whole day carries into the day number
    if jd_frac >= 1.0:
        return jd_int + 1, 0.0
    return jd_int, jd_frac
