"""Define the command line interface for the TAQVIM date conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from ..text.digits import DIGIT_SCRIPTS
from .logger import taqvimLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        taqvimLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def separatorChecker(separator):
    """Checks that a date separator passed to the CLI parser is a single character.

    Args:
        separator (``str``): separator given to CLI parser.

    Raises:
        ValueError: if the separator is not exactly one character long

    Returns:
        ``str``: the validated separator
    """
    if len(separator) != 1:
        taqvimLogError("Bad date separator given to CLI")
        raise ValueError(separator)
    return separator


def _addSeparatorArgument(subparser):
    subparser.add_argument(
        "-s",
        "--separator",
        dest="separator",
        metavar="SEP",
        default=None,
        type=separatorChecker,
        help="Field separator of DATE. DEFAULT: configured separator ('-')",
    )


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="TAQVIM Command Line Interface")
    scripts = tuple(DIGIT_SCRIPTS)

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a TAQVIM behavioral config file",
    )

    parser.add_argument(
        "--digits",
        dest="output_digits",
        choices=scripts,
        default=None,
        help="Digit script used for printed results. DEFAULT: configured script ('latin')",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    g2j = subparsers.add_parser("g2j", help="Convert a Gregorian date string to a Jalali date")
    g2j.add_argument("date", metavar="DATE", help="Gregorian date, e.g. 2025-12-27")
    _addSeparatorArgument(g2j)

    j2g = subparsers.add_parser("j2g", help="Convert a Jalali date string to a Gregorian date")
    j2g.add_argument("date", metavar="DATE", help="Jalali date, e.g. 1404-10-06")
    _addSeparatorArgument(j2g)

    unix2j = subparsers.add_parser("unix2j", help="Convert a Unix timestamp to a Jalali date")
    unix2j.add_argument(
        "timestamp",
        metavar="TIMESTAMP",
        type=int,
        help="Seconds since 1970-01-01T00:00:00 UTC",
    )

    j2unix = subparsers.add_parser(
        "j2unix",
        help="Convert a Jalali date string to the Unix timestamp of its UTC midnight",
    )
    j2unix.add_argument("date", metavar="DATE", help="Jalali date, e.g. 1348-10-11")
    _addSeparatorArgument(j2unix)

    digits = subparsers.add_parser("digits", help="Transcode the digits of a piece of text")
    digits.add_argument("text", metavar="TEXT", help="Text holding digits in any script")
    digits.add_argument(
        "--to",
        dest="script",
        choices=scripts,
        default="latin",
        help="Target digit script. DEFAULT: latin",
    )

    return parser
