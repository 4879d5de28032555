"""Process-wide settings controlling how TAQVIM logs and how it reads and prints dates.

Settings live in an INI file with a ``[logging]`` and a ``[formatting]`` section.
The packaged ``default_behavior.config`` is used unless another file is given to
:class:`.BehavioralConfig` or named by the ``TAQVIM_BEHAVIOR_CONFIG`` environment
variable. Options a user file leaves out keep their default values.

.. code-block:: python

    config = BehavioralConfig.getConfig()
    config.formatting.Separator  # "-"
    config.logging.Level  # logging.DEBUG
"""

from __future__ import annotations

# Standard Library Imports
import os
from configparser import ConfigParser
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from typing import TYPE_CHECKING

# Local Imports
from . import DIGIT_SCRIPT_NAMES

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final

LOGGING_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": CRITICAL,
    "ERROR": ERROR,
    "WARNING": WARNING,
    "INFO": INFO,
    "DEBUG": DEBUG,
    "NOTSET": NOTSET,
}
"""``dict``: level names accepted by ``[logging] Level``."""


def _parseLoggingLevel(value: str) -> int:
    return LOGGING_LEVELS.get(value.strip().upper(), NOTSET)


def _parseDigitScript(value: str) -> str:
    script = value.strip().lower()
    return script if script in DIGIT_SCRIPT_NAMES else DIGIT_SCRIPT_NAMES[0]


class SubConfig:
    """A single ``[section]`` of the config, with each option as an attribute.

    Lets callers write ``config.formatting.Separator`` instead of indexing nested mappings.
    """

    def __init__(self, section: str):
        """Create an empty section.

        Args:
            section (``str``): name of the config section
        """
        if not isinstance(section, str):
            raise TypeError(f"Config section name must be a str, not {type(section).__name__}")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Store option `name`, refusing to replace a value that was already stored.

        Args:
            name (``str``): option name
            value (``any``): parsed option value

        Raises:
            AttributeError: if `name` was already stored on this section
        """
        if name in vars(self):
            raise AttributeError(
                f"[{self.section}] {name} is already set to {getattr(self, name)!r}",
            )
        setattr(self, name, value)

    def __repr__(self):
        """."""
        options = ", ".join(f"{key}={value!r}" for key, value in vars(self).items() if key != "section")
        return f"SubConfig({self.section!r}: {options})"


class CustomConfigParser(ConfigParser):
    """``ConfigParser`` that also understands logging level and digit script values.

    Adds the ``getlogginglevel()`` and ``getdigitscript()`` getters. Unknown level names
    read as ``NOTSET`` and unknown scripts read as ``"latin"``.
    """

    def __init__(self):
        """Register the TAQVIM value converters."""
        super().__init__(
            converters={
                "logginglevel": _parseLoggingLevel,
                "digitscript": _parseDigitScript,
            },
        )


class BehavioralConfig:
    """Singleton holding the active TAQVIM settings.

    Creating an instance parses a config file and makes the result the shared config
    returned by :meth:`.getConfig`.
    """

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    CONFIG_ENV_VARIABLE: Final[str] = "TAQVIM_BEHAVIOR_CONFIG"
    """``str``: environment variable naming a config file used when no path is given."""

    DEFAULT_SECTIONS: Final[dict[str, dict[str, Any]]] = {
        "logging": {
            "OutputLocation": "stdout",
            "Level": DEBUG,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "formatting": {
            "Separator": "-",
            "OutputDigits": DIGIT_SCRIPT_NAMES[0],
        },
    }

    OPTION_TYPES: Final[dict[str, dict[str, str]]] = {
        "logging": {
            "OutputLocation": "",
            "Level": "logginglevel",
            "MaxFileSize": "int",
            "MaxFileCount": "int",
            "AllowMultipleHandlers": "boolean",
        },
        "formatting": {
            "Separator": "",
            "OutputDigits": "digitscript",
        },
    }
    """``dict``: getter suffix used to read each option, ``""`` for plain strings."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Read the settings and install them as the shared config.

        Args:
            config_file_path (``str``, optional): user config file. Defaults to the file named
                by ``TAQVIM_BEHAVIOR_CONFIG``, then to the packaged defaults. A path that doesn't
                exist leaves every option at its default.

        Raises:
            KeyError: if a default option has no entry in :attr:`.OPTION_TYPES`
        """
        self._parser = CustomConfigParser()

        if config_file_path is None:
            config_file_path = os.environ.get(self.CONFIG_ENV_VARIABLE)

        if config_file_path is None:
            default_file = resources.files("taqvim.common").joinpath(self.DEFAULT_CONFIG_FILE)
            self._parser.read_string(default_file.read_text(encoding="utf-8"))
        else:
            self._parser.read(config_file_path, encoding="utf-8")

        for section, defaults in self.DEFAULT_SECTIONS.items():
            sub = SubConfig(section)
            for option, default in defaults.items():
                sub.setonce(option, self._readOption(section, option, default))

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    def _readOption(self, section: str, option: str, default: Any) -> Any:
        """Parse one option with its typed getter, or return `default` when it's absent."""
        try:
            kind = self.OPTION_TYPES[section][option]
        except KeyError as err:
            raise KeyError(f"Configuration item '{section}::{option}' lacks a type classification.") from err

        getter = getattr(self._parser, f"get{kind}")
        return getter(section, option, fallback=default)

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return the shared config, reading it first if no instance exists yet.

        Args:
            config_file_path (``str``, optional): config file used only when the shared config
                is created by this call
        """
        if cls.__shared_inst is None:
            cls.__shared_inst = cls(config_file_path=config_file_path)

        return cls.__shared_inst
