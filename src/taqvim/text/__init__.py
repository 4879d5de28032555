"""Text helpers composed with the calendar core: digit transcoding and date-string parsing."""

from __future__ import annotations

# Local Imports
from .digits import toLatinDigits, toPersianDigits


def latinDigitsToPersian(text: str) -> str:
    """Replace each Latin digit in `text` with its Persian counterpart.

    See Also:
        :func:`.toPersianDigits`
    """
    return toPersianDigits(text)


def persianOrArabicDigitsToLatin(text: str) -> str:
    """Replace each Persian or Arabic-Indic digit in `text` with its Latin counterpart.

    See Also:
        :func:`.toLatinDigits`
    """
    return toLatinDigits(text)
