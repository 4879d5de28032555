from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# TAQVIM Imports
from taqvim.common.behavioral_config import BehavioralConfig


@pytest.fixture(autouse=True)
def _resetBehavioralConfig(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test the packaged default settings.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): used to hide a user's ``TAQVIM_BEHAVIOR_CONFIG``

    Note:
        The shared config is rebuilt before and after each test, so settings one test
        changes never reach another.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(BehavioralConfig.CONFIG_ENV_VARIABLE, raising=False)
        BehavioralConfig()
        yield
        BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Logger for messages emitted by the tests themselves."""
    logger = logging.getLogger("taqvim.tests")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ``--runslow``."""
    parser.addoption(
        "--runslow",
        action="store_true",
        default=False,
        help="also run the exhaustive calendar sweeps",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Declare the custom markers."""
    config.addinivalue_line("markers", "slow: exhaustive test, only run with --runslow")
    config.addinivalue_line("markers", "regression: pins a previously fixed conversion")


def pytest_collection_modifyitems(
    session: pytest.Session,
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip tests marked ``slow`` unless ``--runslow`` was given."""
    if config.getoption("--runslow"):
        return

    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
