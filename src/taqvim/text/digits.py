"""Transcode digit glyphs between the Latin, Persian and Arabic-Indic scripts.

Only the ten digit characters of each script are touched; every other
character passes through unchanged.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..common import DIGIT_SCRIPT_NAMES
from ..common.logger import taqvimLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final

LATIN_ZERO: Final[int] = ord("0")
PERSIAN_ZERO: Final[int] = 0x06F0
ARABIC_ZERO: Final[int] = 0x0660

LATIN_DIGITS: Final[str] = "".join(chr(LATIN_ZERO + value) for value in range(10))
PERSIAN_DIGITS: Final[str] = "".join(chr(PERSIAN_ZERO + value) for value in range(10))
ARABIC_DIGITS: Final[str] = "".join(chr(ARABIC_ZERO + value) for value in range(10))

_TO_PERSIAN = str.maketrans(LATIN_DIGITS, PERSIAN_DIGITS)
_TO_ARABIC = str.maketrans(LATIN_DIGITS, ARABIC_DIGITS)
_TO_LATIN = str.maketrans(PERSIAN_DIGITS + ARABIC_DIGITS, LATIN_DIGITS * 2)


def toPersianDigits(text: str) -> str:
    """Replace each Latin digit in `text` with its Persian counterpart."""
    return text.translate(_TO_PERSIAN)


def toArabicDigits(text: str) -> str:
    """Replace each Latin digit in `text` with its Arabic-Indic counterpart."""
    return text.translate(_TO_ARABIC)


def toLatinDigits(text: str) -> str:
    """Replace each Persian or Arabic-Indic digit in `text` with its Latin counterpart.

    Digits from both scripts may be mixed in the same string; each converts independently.
    """
    return text.translate(_TO_LATIN)


DIGIT_SCRIPTS: Final[dict] = dict(
    zip(DIGIT_SCRIPT_NAMES, (toLatinDigits, toPersianDigits, toArabicDigits), strict=True),
)
"""``dict``: maps a script name to the function rendering digits in that script."""


def transcodeDigits(text: str, script: str) -> str:
    """Render every digit of `text` in the named script.

    Args:
        text (``str``): text holding digits in any supported script
        script (``str``): one of ``"latin"``, ``"persian"`` or ``"arabic"``

    Raises:
        ValueError: if `script` is not a supported script name

    Returns:
        ``str``: `text` with all of its digits rendered in `script`
    """
    if script not in DIGIT_SCRIPTS:
        taqvimLogError(f"Unknown digit script: {script!r}")
        raise ValueError(script)

    return DIGIT_SCRIPTS[script](toLatinDigits(text))
