"""Benchmark runner: setup, warmup, timed executions, cleanup.

Usage:
    from quickbench.runner import Runner

    runner = Runner("sort", lambda: sorted(data), count=1000)
    result = runner.run_blocking()

    # Work items that return awaitables
    runner = Runner("fetch", fetch_page, setup=connect, cleanup=disconnect)
    result = await runner.run()

Progress goes to ``runner.log`` (INFO at start and end, FINE per phase,
DEBUG per iteration). Configure ``quickbench.utils.logger.Logger`` or pass
any object with a ``log(level, message)`` method to see it.
"""

import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from pydantic import ValidationError

from quickbench.errors import InvalidConfiguration
from quickbench.models.benchmark_models import BenchmarkConfig
from quickbench.models.constants import DEFAULT_COUNT, WARMUP_ITERATIONS
from quickbench.results import ResultSet
from quickbench.utils.logger import FINE

WorkItem = Callable[[], Awaitable[Any] | Any]
Invoker = Callable[[WorkItem], Awaitable[None]]


class ProgressSink(Protocol):
    """Anything that accepts leveled messages, e.g. ``logging.Logger``."""

    def log(self, level: int, msg: str) -> None: ...


async def _invoke_suspending(work: WorkItem) -> None:
    outcome = work()
    if inspect.isawaitable(outcome):
        await outcome


async def _invoke_blocking(work: WorkItem) -> None:
    work()


class Runner:
    """Times a unit of work over a fixed number of sequential executions.

    The same protocol backs both entry points:

        1. setup (untimed, optional)
        2. warmup: execute() 5 times, untimed, if enabled
        3. execute() ``count`` times, each timed on its own
        4. cleanup (untimed, optional)
        5. build and log the ResultSet

    Any exception from a work item propagates unchanged and ends the run;
    cleanup is not called and no result is produced.

    Example:
        >>> runner = Runner("noop", lambda: None, count=3, warmup=False)
        >>> len(runner.run_blocking())
        3
    """

    def __init__(
        self,
        name: str,
        execute: WorkItem,
        *,
        setup: WorkItem | None = None,
        cleanup: WorkItem | None = None,
        count: int = DEFAULT_COUNT,
        warmup: bool = True,
        log: ProgressSink | None = None,
    ) -> None:
        """Validate the configuration and store the work items.

        Args:
            name: Benchmark name, also used for the default logger name.
            execute: Work to be timed. Called ``count`` times.
            setup: Called once before warmup, not timed.
            cleanup: Called once after the timed loop, not timed.
            count: Number of timed executions, must be > 0.
            warmup: Run execute() 5 untimed times before measuring.
            log: Progress sink. Defaults to the ``quickbench.<name>`` logger.

        Raises:
            InvalidConfiguration: If count is not a positive integer.
        """
        try:
            config = BenchmarkConfig(name=name, count=count, warmup=warmup)
        except ValidationError as e:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidConfiguration(name, reason) from e

        self.config = config
        self.execute = execute
        self.setup = setup
        self.cleanup = cleanup
        self.log: ProgressSink = (
            log if log is not None else logging.getLogger(f"quickbench.{name}")
        )

    @classmethod
    def from_config(
        cls,
        config: BenchmarkConfig,
        execute: WorkItem,
        *,
        setup: WorkItem | None = None,
        cleanup: WorkItem | None = None,
        log: ProgressSink | None = None,
    ) -> "Runner":
        """Build a runner from an existing BenchmarkConfig."""
        return cls(
            config.name,
            execute,
            setup=setup,
            cleanup=cleanup,
            count=config.count,
            warmup=config.warmup,
            log=log,
        )

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def count(self) -> int:
        return self.config.count

    @property
    def warmup(self) -> bool:
        return self.config.warmup

    def __repr__(self) -> str:
        return f"Runner(name={self.name!r}, count={self.count}, warmup={self.warmup})"

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    async def run(self) -> ResultSet:
        """Run the benchmark, awaiting any work item that returns an awaitable."""
        return await self._protocol(_invoke_suspending)

    def run_blocking(self) -> ResultSet:
        """Run the benchmark synchronously.

        setup, execute and cleanup must not return awaitables here; anything
        they return is ignored.
        """
        # _invoke_blocking never awaits, so one send drives the protocol to the end.
        protocol = self._protocol(_invoke_blocking)
        try:
            protocol.send(None)
        except StopIteration as done:
            result: ResultSet = done.value
            return result
        protocol.close()
        raise RuntimeError(f"Benchmark '{self.name}' suspended inside run_blocking()")

    # -------------------------------------------------------------------------
    # Protocol
    # -------------------------------------------------------------------------

    async def _protocol(self, invoke: Invoker) -> ResultSet:
        count = self.config.count
        self.log.log(logging.INFO, "Start benchmarking.")

        self.log.log(FINE, "Running setup.")
        if self.setup is not None:
            await invoke(self.setup)

        if self.config.warmup:
            self.log.log(FINE, f"Running {WARMUP_ITERATIONS} warmup test")
            for _ in range(WARMUP_ITERATIONS):
                await invoke(self.execute)

        measurements: list[int] = []
        self.log.log(FINE, f"Executing code {count} times.")
        for i in range(count):
            self.log.log(logging.DEBUG, f"Running test {i + 1}/{count}")
            start = time.perf_counter_ns()
            await invoke(self.execute)
            elapsed = time.perf_counter_ns() - start
            measurements.append(elapsed // 1_000)

        self.log.log(FINE, "Running cleanup.")
        if self.cleanup is not None:
            await invoke(self.cleanup)

        self.log.log(FINE, "Benchmark done!")
        result = ResultSet(measurements)
        self.log.log(logging.INFO, result.render())
        return result
