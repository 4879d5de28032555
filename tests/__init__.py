"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CONFIG_DIR = Path("configs")
CUSTOM_CONFIG_FILE = CONFIG_DIR / "custom_behavior.config"
PARTIAL_CONFIG_FILE = CONFIG_DIR / "partial_behavior.config"

# Gregorian date, Jalali date pairs that must hold exactly
KNOWN_DATE_PAIRS: tuple[tuple[tuple[int, int, int], tuple[int, int, int]], ...] = (
    ((2025, 12, 27), (1404, 10, 6)),
    ((1970, 1, 1), (1348, 10, 11)),
    ((2000, 1, 1), (1378, 10, 11)),
    ((1979, 2, 11), (1357, 11, 22)),
    ((2025, 3, 20), (1403, 12, 30)),
    ((2025, 3, 21), (1404, 1, 1)),
)

# Gregorian date, Unix timestamp of its UTC midnight
KNOWN_EPOCH_PAIRS: tuple[tuple[tuple[int, int, int], int], ...] = (
    ((1970, 1, 1), 0),
    ((1970, 1, 2), 86400),
    ((2000, 1, 1), 946684800),
    ((2025, 12, 27), 1766793600),
)
