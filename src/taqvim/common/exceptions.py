"""Contains all the custom-defined exceptions used in TAQVIM."""

from __future__ import annotations


class TaqvimError(Exception):
    """Base class for errors raised by TAQVIM."""


class DateFormatError(TaqvimError, ValueError):
    """Exception indicating a date string is malformed or holds an out-of-range field."""

    def __init__(self, date_str: str, reason: str):
        """Record the offending string and why it was rejected.

        Args:
            date_str (``str``): date string that failed to parse
            reason (``str``): short description of the problem
        """
        super().__init__(f"{reason}: {date_str!r}")
        self.date_str = date_str
        self.reason = reason
