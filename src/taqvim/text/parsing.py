"""Parse and format fixed-layout ``YYYY-MM-DD`` date strings.

This is the validating boundary in front of the unchecked calendar converters.
Input digits may be Latin, Persian or Arabic-Indic. Fields are split on a single
separator character (``formatting.Separator`` from the behavioral config when
not given). Output is always zero-padded and joined with ``-``.

The public ``parse*`` functions never raise for bad input: any structural or
range problem yields ``None``. :func:`.splitDateString` is the strict form that
raises :class:`.DateFormatError` with the reason.
"""

from __future__ import annotations

# Standard Library Imports
import re

# Local Imports
from ..calendars.conversions import gregorianToJalali, jalaliToGregorian
from ..calendars.dates import CalendarDate, GregorianDate, JalaliDate
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import DateFormatError
from ..common.logger import taqvimLogError
from .digits import toLatinDigits

_INTEGER_FIELD = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FIELD_COUNT = 3
_FIELD_RANGE = range(-(2**31), 2**31)
_MONTH_RANGE = range(1, 13)
_DAY_RANGE = range(1, 32)


def _resolveSeparator(separator: str | None) -> str:
    if separator is None:
        separator = BehavioralConfig.getConfig().formatting.Separator

    if not separator:
        taqvimLogError("Error: date separator must be a non-empty string.")
        raise ValueError(separator)

    return separator


def splitDateString(date_str: str, separator: str | None = None) -> tuple[int, int, int]:
    """Split a date string into validated ``(year, month, day)`` integers.

    Args:
        date_str (``str``): date string, e.g. ``"1404-10-06"`` or ``"۱۴۰۴/۱۰/۰۶"``
        separator (``str``, optional): field separator. Defaults to the configured separator.

    Raises:
        DateFormatError: if the string does not hold exactly three 32-bit integer fields, or
            its month is outside (1-12), or its day is outside (1-31)
        ValueError: if `separator` is empty

    Returns:
        ``tuple``: year, month and day as integers
    """
    separator = _resolveSeparator(separator)
    fields = toLatinDigits(date_str).split(separator)

    if len(fields) != _FIELD_COUNT:
        raise DateFormatError(date_str, f"expected {_FIELD_COUNT} fields, found {len(fields)}")

    for field in fields:
        if not _INTEGER_FIELD.fullmatch(field):
            raise DateFormatError(date_str, f"field {field!r} is not an integer")
        if int(field) not in _FIELD_RANGE:
            raise DateFormatError(date_str, f"field {field!r} is outside the 32-bit integer range")

    year, month, day = (int(field) for field in fields)
    if month not in _MONTH_RANGE:
        raise DateFormatError(date_str, f"month {month} is outside 1-12")
    if day not in _DAY_RANGE:
        raise DateFormatError(date_str, f"day {day} is outside 1-31")

    return year, month, day


def parseGregorianString(date_str: str, separator: str | None = None) -> GregorianDate | None:
    """Parse a Gregorian date string, returning ``None`` if it is malformed."""
    try:
        return GregorianDate(*splitDateString(date_str, separator))
    except DateFormatError:
        return None


def parseJalaliString(date_str: str, separator: str | None = None) -> JalaliDate | None:
    """Parse a Jalali date string, returning ``None`` if it is malformed."""
    try:
        return JalaliDate(*splitDateString(date_str, separator))
    except DateFormatError:
        return None


def formatDate(calendar_date: CalendarDate | tuple[int, int, int]) -> str:
    """Format a date triple as zero-padded ``YYYY-MM-DD``."""
    year, month, day = calendar_date
    return f"{year:04d}-{month:02d}-{day:02d}"


def parseGregorianStringToJalaliString(date_str: str, separator: str | None = None) -> str | None:
    """Convert a Gregorian date string into a Jalali ``YYYY-MM-DD`` string.

    Args:
        date_str (``str``): Gregorian date string in any supported digit script
        separator (``str``, optional): field separator of `date_str`. Defaults to the
            configured separator.

    Returns:
        ``str`` | ``None``: the Jalali date, or ``None`` if `date_str` is malformed
    """
    gregorian = parseGregorianString(date_str, separator)
    if gregorian is None:
        return None

    return formatDate(gregorianToJalali(*gregorian))


def parseJalaliStringToGregorianString(date_str: str, separator: str | None = None) -> str | None:
    """Convert a Jalali date string into a Gregorian ``YYYY-MM-DD`` string.

    Args:
        date_str (``str``): Jalali date string in any supported digit script
        separator (``str``, optional): field separator of `date_str`. Defaults to the
            configured separator.

    Returns:
        ``str`` | ``None``: the Gregorian date, or ``None`` if `date_str` is malformed
    """
    jalali = parseJalaliString(date_str, separator)
    if jalali is None:
        return None

    return formatDate(jalaliToGregorian(*jalali))
