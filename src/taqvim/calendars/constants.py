"""Global calendar constants.

This module holds the cycle lengths, epoch offsets and month tables used by the
Gregorian, Jalali and Julian Day Number conversions, allowing for a consistent
place to store them.
"""

from __future__ import annotations

# Conversion constants
DAYS2SEC = 24 * 3600

# Month tables
GREGORIAN_CUMULATIVE_DAYS: tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
"""``tuple``: non-leap days elapsed before the first of each Gregorian month."""

GREGORIAN_MONTH_DAYS: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
"""``tuple``: non-leap Gregorian month lengths, indexed by month number; index 0 is a placeholder."""

JALALI_FIRST_HALF_DAYS = 186
"""``int``: days in the six 31-day months that open every Jalali year."""
JALALI_LONG_MONTH_DAYS = 31
JALALI_SHORT_MONTH_DAYS = 30

# Cycle lengths, in days
JALALI_GRAND_CYCLE_YEARS = 33
JALALI_GRAND_CYCLE_DAYS = 12053
JALALI_GRAND_CYCLE_LEAP_DAYS = 8
FOUR_YEAR_CYCLE_DAYS = 1461
GREGORIAN_400_YEAR_DAYS = 146097
GREGORIAN_100_YEAR_DAYS = 36524
COMMON_YEAR_DAYS = 365

# Day-count origins shared by the Gregorian <-> Jalali converters
GREGORIAN_DAY_OFFSET = 355666
JALALI_DAY_OFFSET = -355668
JALALI_YEAR_SHIFT = 1595

# Julian Day Numbers
UNIX_EPOCH_JDN = 2440588
"""``int``: Julian Day Number of 1970-01-01."""
JDN_GREGORIAN_OFFSET = 32045
JDN_ERA_OFFSET = 32044
JDN_YEAR_OFFSET = 4800
