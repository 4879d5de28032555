"""Convert between proleptic Gregorian dates and integer Julian Day Numbers.

The Julian Day Number (JDN) is a continuous count of days, used here as a
calendar-agnostic pivot for epoch arithmetic. Day 0 is November 24, 4714 BCE in
the proleptic Gregorian calendar; the usual noon convention is dropped so each
JDN names a whole civil day.

References:
    Fliegel, H. F. & Van Flandern, T. C., "A Machine Algorithm for Processing
    Calendar Dates", Communications of the ACM, 11 (10), 1968.
"""

from __future__ import annotations

# Local Imports
from . import constants as const
from .dates import GregorianDate


def gregorianToJdn(year: int, month: int, day: int) -> int:
    """Determine the Julian Day Number of a Gregorian date.

    Args:
        year (``int``): Gregorian year
        month (``int``): Gregorian month, (1-12)
        day (``int``): Gregorian day of the month

    Returns:
        ``int``: Julian Day Number of the date
    """
    # Shift the year to start in March so the leap day falls last
    march_shift = (14 - month) // 12
    shifted_year = year + const.JDN_YEAR_OFFSET - march_shift
    shifted_month = month + 12 * march_shift - 3

    return (
        day
        + (153 * shifted_month + 2) // 5
        + const.COMMON_YEAR_DAYS * shifted_year
        + shifted_year // 4
        - shifted_year // 100
        + shifted_year // 400
        - const.JDN_GREGORIAN_OFFSET
    )


def jdnToGregorian(jdn: int) -> GregorianDate:
    """Determine the Gregorian date of a Julian Day Number.

    Args:
        jdn (``int``): Julian Day Number

    Returns:
        :class:`.GregorianDate`: calendar date of the given day
    """
    day_of_era = jdn + const.JDN_ERA_OFFSET
    century = (4 * day_of_era + 3) // const.GREGORIAN_400_YEAR_DAYS
    day_of_century = day_of_era - (const.GREGORIAN_400_YEAR_DAYS * century) // 4
    year_of_century = (4 * day_of_century + 3) // const.FOUR_YEAR_CYCLE_DAYS
    day_of_year = day_of_century - (const.FOUR_YEAR_CYCLE_DAYS * year_of_century) // 4
    # Months counted from March
    shifted_month = (5 * day_of_year + 2) // 153

    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 - 12 * (shifted_month // 10)
    year = 100 * century + year_of_century - const.JDN_YEAR_OFFSET + shifted_month // 10

    return GregorianDate(year, month, day)
