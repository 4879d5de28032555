"""Helper functions that convert dates between the Gregorian and Jalali calendars.

Both converters work on a running day count: the source date is folded into a
number of days since a shared origin, then unfolded with the target calendar's
cycle lengths. Neither function validates its inputs; an out-of-range month or
day yields an arithmetically derived, meaningless date rather than an error.

All division and remainder here truncates toward zero, which differs from
Python's floor semantics only for negative day counts.
"""

from __future__ import annotations

# Local Imports
from . import constants as const
from .dates import GregorianDate, JalaliDate


def truncDivMod(numerator: int, denominator: int) -> tuple[int, int]:
    """Divide two integers, truncating the quotient toward zero.

    Args:
        numerator (``int``): dividend
        denominator (``int``): divisor, non-zero

    Returns:
        ``tuple``: quotient and remainder, where the remainder takes the sign of `numerator`
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient

    return quotient, numerator - quotient * denominator


def isGregorianLeapYear(year: int) -> bool:
    """Determine whether `year` has a February 29th in the proleptic Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def gregorianMonthLengths(year: int) -> tuple[int, ...]:
    """Return the Gregorian month lengths of `year`, indexed by month number.

    Index 0 is a zero-length placeholder so ``lengths[month]`` reads naturally.
    """
    if not isGregorianLeapYear(year):
        return const.GREGORIAN_MONTH_DAYS

    return const.GREGORIAN_MONTH_DAYS[:2] + (29,) + const.GREGORIAN_MONTH_DAYS[3:]


def _splitYearRemainder(year: int, days: int) -> tuple[int, int]:
    """Absorb the short year of a four-year block into `year`."""
    if days > const.COMMON_YEAR_DAYS:
        extra_years, days = truncDivMod(days - 1, const.COMMON_YEAR_DAYS)
        year += extra_years

    return year, days


def gregorianToJalali(year: int, month: int, day: int) -> JalaliDate:
    """Convert a Gregorian date to a Jalali date.

    Args:
        year (``int``): Gregorian year
        month (``int``): Gregorian month, (1-12)
        day (``int``): Gregorian day of the month

    Returns:
        :class:`.JalaliDate`: the corresponding Jalali date
    """
    # Count this year's leap day only once February is over
    adjusted_year = year + 1 if month > 2 else year

    total_days = (
        const.GREGORIAN_DAY_OFFSET
        + const.COMMON_YEAR_DAYS * year
        + truncDivMod(adjusted_year + 3, 4)[0]
        - truncDivMod(adjusted_year + 99, 100)[0]
        + truncDivMod(adjusted_year + 399, 400)[0]
        + day
        + const.GREGORIAN_CUMULATIVE_DAYS[month - 1]
    )

    cycles, total_days = truncDivMod(total_days, const.JALALI_GRAND_CYCLE_DAYS)
    jalali_year = -const.JALALI_YEAR_SHIFT + const.JALALI_GRAND_CYCLE_YEARS * cycles
    cycles, total_days = truncDivMod(total_days, const.FOUR_YEAR_CYCLE_DAYS)
    jalali_year += 4 * cycles
    jalali_year, total_days = _splitYearRemainder(jalali_year, total_days)

    if total_days < const.JALALI_FIRST_HALF_DAYS:
        month_index, day_index = truncDivMod(total_days, const.JALALI_LONG_MONTH_DAYS)
        return JalaliDate(jalali_year, 1 + month_index, 1 + day_index)

    month_index, day_index = truncDivMod(
        total_days - const.JALALI_FIRST_HALF_DAYS,
        const.JALALI_SHORT_MONTH_DAYS,
    )
    return JalaliDate(jalali_year, 7 + month_index, 1 + day_index)


def jalaliToGregorian(year: int, month: int, day: int) -> GregorianDate:
    """Convert a Jalali date to a Gregorian date.

    Args:
        year (``int``): Jalali year
        month (``int``): Jalali month, (1-12)
        day (``int``): Jalali day of the month

    Returns:
        :class:`.GregorianDate`: the corresponding Gregorian date
    """
    year += const.JALALI_YEAR_SHIFT

    if month < 7:
        month_offset = (month - 1) * const.JALALI_LONG_MONTH_DAYS
    else:
        month_offset = (month - 7) * const.JALALI_SHORT_MONTH_DAYS + const.JALALI_FIRST_HALF_DAYS

    cycles, cycle_year = truncDivMod(year, const.JALALI_GRAND_CYCLE_YEARS)
    total_days = (
        const.JALALI_DAY_OFFSET
        + const.COMMON_YEAR_DAYS * year
        + cycles * const.JALALI_GRAND_CYCLE_LEAP_DAYS
        + truncDivMod(cycle_year + 3, 4)[0]
        + day
        + month_offset
    )

    cycles, total_days = truncDivMod(total_days, const.GREGORIAN_400_YEAR_DAYS)
    gregorian_year = 400 * cycles

    # First century of each 400-year cycle keeps its leap day
    if total_days > const.GREGORIAN_100_YEAR_DAYS:
        cycles, total_days = truncDivMod(total_days - 1, const.GREGORIAN_100_YEAR_DAYS)
        gregorian_year += 100 * cycles
        if total_days >= const.COMMON_YEAR_DAYS:
            total_days += 1

    cycles, total_days = truncDivMod(total_days, const.FOUR_YEAR_CYCLE_DAYS)
    gregorian_year += 4 * cycles
    gregorian_year, total_days = _splitYearRemainder(gregorian_year, total_days)

    # Walk the month table until the remaining days fit
    gregorian_day = total_days + 1
    month_lengths = gregorianMonthLengths(gregorian_year)
    gregorian_month = 0
    while gregorian_month < 13 and gregorian_day > month_lengths[gregorian_month]:
        gregorian_day -= month_lengths[gregorian_month]
        gregorian_month += 1

    return GregorianDate(gregorian_year, gregorian_month, gregorian_day)
