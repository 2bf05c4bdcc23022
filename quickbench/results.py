"""Benchmark results: sorted per-run durations and their statistics.

Usage:
    from quickbench.results import OutputFormat, ResultSet

    result = ResultSet([50, 10, 30])
    result.bottom, result.peak, result.average   # 10, 50, 30.0
    print(result.render())

    # Export alongside the config that produced it
    result.emit("results.json", config, OutputFormat.JSON)
"""

import json
import math
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path
from typing import TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from quickbench.errors import EmptyResultSet
from quickbench.models.benchmark_models import BenchmarkConfig, BenchmarkSummary
from quickbench.models.constants import MICROSECONDS_PER_SECOND

_MICROSECONDS_PER_MINUTE = 60 * MICROSECONDS_PER_SECOND
_MICROSECONDS_PER_HOUR = 60 * _MICROSECONDS_PER_MINUTE


class OutputFormat(Enum):
    """Supported output formats for benchmark results."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # The one-line render()


def format_duration(microseconds: int) -> str:
    """Format a duration as ``H:MM:SS.ffffff``.

    Hours are not capped or padded; the fractional part always has six
    digits, so ``format_duration(10_000) == "0:00:00.010000"``.
    """
    hours, rest = divmod(microseconds, _MICROSECONDS_PER_HOUR)
    minutes, rest = divmod(rest, _MICROSECONDS_PER_MINUTE)
    seconds, micros = divmod(rest, MICROSECONDS_PER_SECOND)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{micros:06d}"


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; 2.5us must render as 3us.
    return math.floor(value + 0.5)


class ResultSet:
    """Immutable, ascending-sorted execution times of one benchmark run.

    Every statistic is derived from the sorted tuple on access, so repeated
    reads always agree with ``measurements``.

    Example:
        >>> result = ResultSet([50, 10, 30])
        >>> result.measurements
        (10, 30, 50)
        >>> result.average
        30.0
    """

    __slots__ = ("_measurements",)

    def __init__(self, measurements: Iterable[int]) -> None:
        """Sort and freeze the measurements.

        Args:
            measurements: Execution times in microseconds, in any order.

        Raises:
            EmptyResultSet: If no measurements are given.
        """
        ordered = tuple(sorted(measurements))
        if not ordered:
            raise EmptyResultSet()
        self._measurements = ordered

    @property
    def measurements(self) -> tuple[int, ...]:
        """Raw execution times (microseconds), ascending."""
        return self._measurements

    @property
    def bottom(self) -> int:
        """The shortest execution time in microseconds."""
        return self._measurements[0]

    @property
    def peak(self) -> int:
        """The longest execution time in microseconds."""
        return self._measurements[-1]

    @property
    def average(self) -> float:
        """The mean execution time in microseconds."""
        return sum(self._measurements) / len(self._measurements)

    def __len__(self) -> int:
        return len(self._measurements)

    def __iter__(self) -> Iterator[int]:
        return iter(self._measurements)

    def __repr__(self) -> str:
        return (
            f"ResultSet(count={len(self)}, bottom={self.bottom}, "
            f"peak={self.peak}, average={self.average:.1f})"
        )

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """One-line summary of peak, bottom and rounded average."""
        return (
            f"\tpeak: {format_duration(self.peak)}"
            f"\tbottom: {format_duration(self.bottom)}"
            f"\tavg: ~{format_duration(_round_half_up(self.average))}"
        )

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_summary(self, config: BenchmarkConfig) -> BenchmarkSummary:
        """Combine these results with the config that produced them."""
        return BenchmarkSummary(
            name=config.name,
            count=config.count,
            warmup=config.warmup,
            peak=self.peak,
            bottom=self.bottom,
            average=self.average,
            measurements=list(self._measurements),
        )

    def emit(
        self,
        output: str | Path | TextIO,
        config: BenchmarkConfig,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Write results to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            config: Configuration of the run, used for the summary header.
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        if format == OutputFormat.JSON:
            content = json.dumps(self.to_summary(config).model_dump(), indent=indent)
        elif format == OutputFormat.YAML:
            content = self._to_yaml(config, indent)
        elif format == OutputFormat.TEXT:
            content = f"{config.name}{self.render()}"
        else:
            raise ValueError(f"Unknown format: {format}")

        if isinstance(output, str | Path):
            Path(output).write_text(content + "\n")
        else:
            output.write(content + "\n")

    def _to_yaml(self, config: BenchmarkConfig, indent: int) -> str:
        result: str = yaml.safe_dump(
            self.to_summary(config).model_dump(),
            indent=indent,
            default_flow_style=False,
            sort_keys=False,
        )
        return result.rstrip("\n")
