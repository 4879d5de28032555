"""Convert between Unix timestamps and calendar dates.

Timestamps are whole seconds since 1970-01-01T00:00:00 UTC. Only the calendar
day is kept, so every conversion to a timestamp lands on UTC midnight. Moments
before the epoch are not supported: those conversions return ``None`` instead
of a date or timestamp.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import date

# Local Imports
from ..common.logger import taqvimLogError
from . import constants as const
from .conversions import gregorianToJalali, jalaliToGregorian
from .dates import GregorianDate, JalaliDate
from .julian_day import gregorianToJdn, jdnToGregorian


def unixToGregorian(timestamp: int) -> GregorianDate | None:
    """Determine the UTC Gregorian date a Unix timestamp falls on.

    Args:
        timestamp (``int``): seconds since the Unix epoch

    Returns:
        :class:`.GregorianDate` | ``None``: the date, or ``None`` for negative timestamps
    """
    if timestamp < 0:
        return None

    days = timestamp // const.DAYS2SEC
    return jdnToGregorian(const.UNIX_EPOCH_JDN + days)


def gregorianToUnix(year: int, month: int, day: int) -> int | None:
    """Determine the Unix timestamp of UTC midnight on a Gregorian date.

    Args:
        year (``int``): Gregorian year
        month (``int``): Gregorian month, (1-12)
        day (``int``): Gregorian day of the month

    Returns:
        ``int`` | ``None``: seconds since the epoch, or ``None`` for dates before 1970-01-01
    """
    days = gregorianToJdn(year, month, day) - const.UNIX_EPOCH_JDN
    if days < 0:
        return None

    return days * const.DAYS2SEC


def unixToJalali(timestamp: int) -> JalaliDate | None:
    """Determine the Jalali date a Unix timestamp falls on, in UTC.

    See Also:
        :func:`.unixToGregorian`, :func:`.gregorianToJalali`
    """
    gregorian = unixToGregorian(timestamp)
    if gregorian is None:
        return None

    return gregorianToJalali(*gregorian)


def jalaliToUnix(year: int, month: int, day: int) -> int | None:
    """Determine the Unix timestamp of UTC midnight on a Jalali date.

    See Also:
        :func:`.jalaliToGregorian`, :func:`.gregorianToUnix`
    """
    return gregorianToUnix(*jalaliToGregorian(year, month, day))


def dateToJalali(calendar_date: date) -> JalaliDate:
    """Convert a ``date`` (or ``datetime``) object to a :class:`.JalaliDate`.

    The time of day, and any timezone, of a ``datetime`` is ignored.

    Args:
        calendar_date (date): ``date`` object to be converted.

    Returns:
        JalaliDate: Converted :class:`.JalaliDate` object.
    """
    if not isinstance(calendar_date, date):
        taqvimLogError("Error: `calendar_date` must be a `datetime.date` object.")
        raise TypeError(type(calendar_date))

    return gregorianToJalali(calendar_date.year, calendar_date.month, calendar_date.day)


def jalaliToDate(year: int, month: int, day: int) -> date:
    """Convert a Jalali date to a ``date`` object.

    Args:
        year (``int``): Jalali year
        month (``int``): Jalali month, (1-12)
        day (``int``): Jalali day of the month

    Raises:
        ValueError: if the converted triple is not a real Gregorian date

    Returns:
        date: Converted ``date`` object.
    """
    return date(*jalaliToGregorian(year, month, day))
