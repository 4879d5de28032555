"""Configuration, logging, errors and command line plumbing shared by the TAQVIM packages."""

from __future__ import annotations

DIGIT_SCRIPT_NAMES: tuple[str, ...] = ("latin", "persian", "arabic")
"""``tuple``: digit scripts TAQVIM can print, the first being the fallback."""
