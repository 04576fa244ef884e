"""Constants shared by the Julian date conversions."""

from datetime import datetime, timezone

SECONDS_PER_DAY = 86400
NANOSECONDS_PER_SECOND = 1_000_000_000
NANOSECONDS_PER_DAY = SECONDS_PER_DAY * NANOSECONDS_PER_SECOND

# Julian date of 1970-01-01T00:00:00 UTC
JULIAN_UNIX_EPOCH = 2440587.5

# Julian date of 2000-01-01T12:00:00 UTC
J2000_EPOCH = 2451545.0
DAYS_PER_CENTURY = 36525.0

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Decimal places kept when splitting a Julian date into parts
JD_PRECISION = 9
