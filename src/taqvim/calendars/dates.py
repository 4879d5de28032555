"""Defines :class:`.GregorianDate` & :class:`.JalaliDate` classes.

The classes defined in this module are used to rigidly differentiate between
Gregorian and Jalali date triples. Both are always going to be plain
``(year, month, day)`` integer tuples, so they're easy targets for confusion.

Subclassing a :class:`~typing.NamedTuple` keeps them usable exactly like the
tuple they wrap: they unpack, index and compare equal to bare tuples. Only
mixing the two calendars is refused.

.. code-block:: python

    gregorian = GregorianDate(2025, 12, 27)
    jalali = JalaliDate(1404, 10, 6)

    gregorian == (2025, 12, 27)  # True
    year, month, day = jalali  # works

    gregorian == jalali  # throws exception

Neither class validates its fields; out-of-range months and days are carried
through untouched.
"""

from __future__ import annotations

# Standard Library Imports
from typing import ClassVar, NamedTuple


class _DateFields(NamedTuple):
    year: int
    month: int
    day: int


class CalendarDate(_DateFields):
    """Shared behavior for calendar-tagged date triples."""

    __slots__ = ()

    CALENDAR: ClassVar[str] = ""
    """``str``: name of the calendar this date belongs to."""

    def _checkCalendar(self, other: object) -> None:
        """Refuse operations between dates tagged with different calendars."""
        if isinstance(other, CalendarDate) and other.CALENDAR != self.CALENDAR:
            raise TypeError(
                f"{type(self).__name__}: Cannot compare {self.CALENDAR} and {other.CALENDAR} dates, use conversion methods.",
            )

    def __eq__(self, other):
        """."""
        self._checkCalendar(other)
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        """."""
        self._checkCalendar(other)
        return tuple.__ne__(self, other)

    def __lt__(self, other):
        """."""
        self._checkCalendar(other)
        return tuple.__lt__(self, other)

    def __le__(self, other):
        """."""
        self._checkCalendar(other)
        return tuple.__le__(self, other)

    def __gt__(self, other):
        """."""
        self._checkCalendar(other)
        return tuple.__gt__(self, other)

    def __ge__(self, other):
        """."""
        self._checkCalendar(other)
        return tuple.__ge__(self, other)

    def __hash__(self):
        """Override hash to return just the tuple representation of the class."""
        return tuple.__hash__(self)

    def isoformat(self) -> str:
        """Return the zero-padded ``YYYY-MM-DD`` form of this date."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self):
        """Return the zero-padded ``YYYY-MM-DD`` form of this date."""
        return self.isoformat()


class GregorianDate(CalendarDate):
    """A ``(year, month, day)`` triple in the proleptic Gregorian calendar."""

    __slots__ = ()

    CALENDAR: ClassVar[str] = "gregorian"

    def toJalali(self) -> JalaliDate:
        """Convert this date to the Jalali calendar.

        See Also:
            :func:`.gregorianToJalali`
        """
        # Local Imports
        from .conversions import gregorianToJalali

        return gregorianToJalali(*self)


class JalaliDate(CalendarDate):
    """A ``(year, month, day)`` triple in the Jalali (solar Hijri) calendar."""

    __slots__ = ()

    CALENDAR: ClassVar[str] = "jalali"

    def toGregorian(self) -> GregorianDate:
        """Convert this date to the Gregorian calendar.

        See Also:
            :func:`.jalaliToGregorian`
        """
        # Local Imports
        from .conversions import jalaliToGregorian

        return jalaliToGregorian(*self)
