"""Exceptions raised by quickbench.

Failures inside a work item are not wrapped: whatever ``setup``, ``execute``
or ``cleanup`` raises reaches the caller of ``run``/``run_blocking`` as is.
"""


class BenchmarkError(Exception):
    """Base exception for quickbench errors."""


class InvalidConfiguration(BenchmarkError, ValueError):
    """Raised when a Runner is built with an unusable configuration."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid configuration for benchmark '{name}': {reason}")


class EmptyResultSet(BenchmarkError, ValueError):
    """Raised when a ResultSet is built from zero measurements."""

    def __init__(self) -> None:
        super().__init__("A ResultSet needs at least one measurement")
