"""Main Module Documentation.

TAQVIM converts dates between the Gregorian and Jalali (solar Hijri / Persian)
calendars, and between either calendar and Unix epoch time. The numeric
converters are re-exported here together with the string helpers that parse
``YYYY-MM-DD`` strings written in Latin, Persian or Arabic-Indic digits.

The top-level module also serves as the command line entry point.
"""

from __future__ import annotations

__version__ = "1.0.0"

# Local Imports
from .calendars.conversions import gregorianToJalali, jalaliToGregorian
from .calendars.dates import GregorianDate, JalaliDate
from .calendars.epoch import (
    dateToJalali,
    gregorianToUnix,
    jalaliToDate,
    jalaliToUnix,
    unixToGregorian,
    unixToJalali,
)
from .text import latinDigitsToPersian, persianOrArabicDigitsToLatin
from .text.parsing import (
    formatDate,
    parseGregorianStringToJalaliString,
    parseJalaliStringToGregorianString,
)

__all__ = [
    "GregorianDate",
    "JalaliDate",
    "dateToJalali",
    "formatDate",
    "gregorianToJalali",
    "gregorianToUnix",
    "jalaliToDate",
    "jalaliToGregorian",
    "jalaliToUnix",
    "latinDigitsToPersian",
    "main",
    "parseGregorianStringToJalaliString",
    "parseJalaliStringToGregorianString",
    "persianOrArabicDigitsToLatin",
    "runTaqvim",
    "unixToGregorian",
    "unixToJalali",
]


def runTaqvim(command: str, value: str | int, separator: str | None = None) -> str | None:
    """Run a single TAQVIM conversion command.

    Args:
        command (``str``): one of ``"g2j"``, ``"j2g"``, ``"unix2j"`` or ``"j2unix"``
        value (``str`` | ``int``): date string for the date commands, seconds for ``"unix2j"``
        separator (``str``, optional): field separator of a date string. Defaults to the
            configured separator.

    Raises:
        ValueError: if `command` is not a known command

    Returns:
        ``str`` | ``None``: the converted value in Latin digits, or ``None`` if `value` could
            not be converted. The reason is logged.
    """
    # Local Imports
    from .common.exceptions import DateFormatError
    from .common.logger import taqvimLogError
    from .text.parsing import splitDateString

    if command == "unix2j":
        jalali = unixToJalali(int(value))
        if jalali is None:
            taqvimLogError(f"Timestamp precedes the Unix epoch: {value}")
            return None
        return formatDate(jalali)

    if command not in ("g2j", "j2g", "j2unix"):
        taqvimLogError(f"Unknown command: {command!r}")
        raise ValueError(command)

    try:
        year, month, day = splitDateString(str(value), separator)
    except DateFormatError as err:
        taqvimLogError(f"Invalid date string, {err}")
        return None

    if command == "g2j":
        return formatDate(gregorianToJalali(year, month, day))

    if command == "j2g":
        return formatDate(jalaliToGregorian(year, month, day))

    timestamp = jalaliToUnix(year, month, day)
    if timestamp is None:
        taqvimLogError(f"Date precedes the Unix epoch: {value}")
        return None
    return str(timestamp)


def main() -> None:
    """TAQVIM main entry point.

    This is the function that the :command:`taqvim` command points to. See :mod:`.cli` for
    details on what command line options are available.

    Raises:
        SystemExit: with status 1 when the requested conversion has no result
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser
    from .common.logger import Logger
    from .text.digits import transcodeDigits

    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    if cli_args.config_path:
        BehavioralConfig(config_file_path=cli_args.config_path)
    Logger("taqvim")

    if cli_args.command == "digits":
        print(transcodeDigits(cli_args.text, cli_args.script))
        return

    if cli_args.command == "unix2j":
        result = runTaqvim(cli_args.command, cli_args.timestamp)
    else:
        result = runTaqvim(cli_args.command, cli_args.date, separator=cli_args.separator)

    if result is None:
        raise SystemExit(1)

    output_digits = cli_args.output_digits or BehavioralConfig.getConfig().formatting.OutputDigits
    print(transcodeDigits(result, output_digits))
