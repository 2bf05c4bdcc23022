"""Shared fixtures for quickbench tests."""

import logging

import pytest

from quickbench.utils.logger import Logger


class RecordingSink:
    """Progress sink that keeps every (level, message) pair."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str]] = []

    def log(self, level: int, msg: str) -> None:
        self.records.append((level, msg))

    @property
    def messages(self) -> list[str]:
        return [msg for _, msg in self.records]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


def _reset_package_logger() -> None:
    root = logging.getLogger("quickbench")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    Logger._configured = False


@pytest.fixture(autouse=True)
def reset_logger():
    """Start every test with an unconfigured Logger."""
    _reset_package_logger()
    yield
    _reset_package_logger()
