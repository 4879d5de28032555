from __future__ import annotations

# Standard Library Imports
import logging
from datetime import date, datetime, timezone

# Third Party Imports
import pytest

# TAQVIM Imports
from taqvim.calendars.dates import GregorianDate, JalaliDate
from taqvim.calendars.epoch import (
    dateToJalali,
    gregorianToUnix,
    jalaliToDate,
    jalaliToUnix,
    unixToGregorian,
    unixToJalali,
)

# Local Imports
from .. import KNOWN_EPOCH_PAIRS

DAY: int = 86400


@pytest.mark.parametrize(("gregorian", "timestamp"), KNOWN_EPOCH_PAIRS)
def testGregorianToUnix(gregorian: tuple[int, int, int], timestamp: int):
    """Test timestamps of UTC midnight on reference dates."""
    assert gregorianToUnix(*gregorian) == timestamp


@pytest.mark.parametrize(("gregorian", "timestamp"), KNOWN_EPOCH_PAIRS)
def testUnixToGregorian(gregorian: tuple[int, int, int], timestamp: int):
    """Test every second of a day maps to that day."""
    assert unixToGregorian(timestamp) == gregorian
    assert unixToGregorian(timestamp + DAY - 1) == gregorian
    assert isinstance(unixToGregorian(timestamp), GregorianDate)


def testAgreesWithDatetime():
    """Test against the UTC calendar day computed by `datetime`."""
    for timestamp in range(0, 4_000_000_000, 7_654_321):
        expected = datetime.fromtimestamp(timestamp, tz=timezone.utc)
        assert unixToGregorian(timestamp) == (expected.year, expected.month, expected.day)


def testEpochScenarios():
    """Test the Unix epoch in the Jalali calendar."""
    assert unixToJalali(0) == (1348, 10, 11)
    assert isinstance(unixToJalali(0), JalaliDate)
    assert jalaliToUnix(1348, 10, 11) == 0
    assert jalaliToUnix(1404, 10, 6) == 1766793600


@pytest.mark.parametrize("timestamp", [-1, -DAY, -1766793600])
def testNegativeTimestamps(timestamp: int):
    """Test timestamps before the epoch have no date."""
    assert unixToGregorian(timestamp) is None
    assert unixToJalali(timestamp) is None


@pytest.mark.parametrize(
    "jalali",
    [(1348, 10, 10), (1348, 1, 1), (1300, 6, 31), (1, 1, 1)],
)
def testPreEpochJalali(jalali: tuple[int, int, int]):
    """Test Jalali dates before 1970-01-01 have no timestamp."""
    assert jalaliToUnix(*jalali) is None


def testPreEpochGregorian():
    """Test the day before the epoch has no timestamp."""
    assert gregorianToUnix(1969, 12, 31) is None
    assert gregorianToUnix(1970, 1, 1) == 0


@pytest.mark.parametrize("days", [0, 1, 59, 365, 10_957, 20_449, 50_000, 400_000])
def testEpochRoundTrip(days: int):
    """Test midnight timestamps survive a round trip through the Jalali calendar."""
    timestamp = days * DAY
    assert jalaliToUnix(*unixToJalali(timestamp)) == timestamp


def testDateToJalali():
    """Test `date` and `datetime` objects convert by calendar day only."""
    assert dateToJalali(date(2025, 12, 27)) == (1404, 10, 6)
    assert dateToJalali(datetime(2025, 12, 27, 23, 59, 59)) == (1404, 10, 6)
    assert isinstance(dateToJalali(date(2025, 12, 27)), JalaliDate)


def testDateToJalaliBadType(caplog: pytest.LogCaptureFixture):
    """Test a non-date argument is refused and logged."""
    with pytest.raises(TypeError):
        dateToJalali("2025-12-27")

    assert ("taqvim", logging.ERROR) in [record[:2] for record in caplog.record_tuples]


def testJalaliToDate():
    """Test Jalali dates convert to `date` objects."""
    assert jalaliToDate(1404, 10, 6) == date(2025, 12, 27)
    assert jalaliToDate(1403, 12, 30) == date(2025, 3, 20)


def testJalaliToDateOutOfRange():
    """Test a triple that is not a real Gregorian date is refused by `date`."""
    # A large negative day drives the day count below zero, leaving month 0
    with pytest.raises(ValueError):  # noqa: PT011
        jalaliToDate(1404, 1, -800000)
