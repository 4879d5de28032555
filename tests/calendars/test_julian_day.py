from __future__ import annotations

# Standard Library Imports
from datetime import date

# Third Party Imports
import pytest

# TAQVIM Imports
from taqvim.calendars.constants import UNIX_EPOCH_JDN
from taqvim.calendars.dates import GregorianDate
from taqvim.calendars.julian_day import gregorianToJdn, jdnToGregorian

# Ordinal of `date` counts 0001-01-01 as day 1
ORDINAL_TO_JDN: int = 1721425

KNOWN_JDNS: tuple[tuple[tuple[int, int, int], int], ...] = (
    ((1970, 1, 1), UNIX_EPOCH_JDN),
    ((2000, 1, 1), 2451545),
    ((1858, 11, 17), 2400001),
    ((1, 1, 1), 1721426),
    ((-4713, 11, 24), 0),
)


@pytest.mark.parametrize(("gregorian", "jdn"), KNOWN_JDNS)
def testGregorianToJdn(gregorian: tuple[int, int, int], jdn: int):
    """Test Julian Day Numbers of reference dates."""
    assert gregorianToJdn(*gregorian) == jdn


@pytest.mark.parametrize(("gregorian", "jdn"), KNOWN_JDNS)
def testJdnToGregorian(gregorian: tuple[int, int, int], jdn: int):
    """Test calendar dates of reference Julian Day Numbers."""
    converted = jdnToGregorian(jdn)
    assert converted == gregorian
    assert isinstance(converted, GregorianDate)


@pytest.mark.parametrize("year", (1, 1600, 1900, 1970, 2000, 2024, 2100, 9999))
def testAgreesWithDateOrdinal(year: int):
    """Test every day of a year against the ordinal count kept by `datetime.date`."""
    first = date(year, 1, 1).toordinal()
    last = date(year, 12, 31).toordinal()
    for ordinal in range(first, last + 1):
        current = date.fromordinal(ordinal)
        jdn = gregorianToJdn(current.year, current.month, current.day)
        assert jdn == ordinal + ORDINAL_TO_JDN
        assert jdnToGregorian(jdn) == (current.year, current.month, current.day)


def testConsecutiveJdns():
    """Test a month boundary and a leap day advance the day count by one."""
    assert gregorianToJdn(2024, 3, 1) - gregorianToJdn(2024, 2, 29) == 1
    assert gregorianToJdn(2024, 2, 29) - gregorianToJdn(2024, 2, 28) == 1
    assert gregorianToJdn(2023, 3, 1) - gregorianToJdn(2023, 2, 28) == 1
