"""Tests for the blocking benchmark runner."""

import asyncio
import logging
import time

import pytest

import quickbench.runner

from quickbench.errors import InvalidConfiguration
from quickbench.models.benchmark_models import BenchmarkConfig
from quickbench.models.constants import WARMUP_ITERATIONS
from quickbench.results import ResultSet
from quickbench.runner import Runner
from quickbench.utils.logger import FINE


class Counter:
    """Callable that counts its invocations."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.mark.parametrize("count", [1, 3, 17, 100])
def test_measurement_count_matches(count):
    """Test that a run yields exactly count measurements."""
    result = Runner("count", lambda: None, count=count, warmup=False).run_blocking()

    assert isinstance(result, ResultSet)
    assert len(result.measurements) == count


@pytest.mark.parametrize("count", [0, -1, -100])
def test_non_positive_count_rejected(count):
    """Test that construction fails and execute is never touched."""
    work = Counter()

    with pytest.raises(InvalidConfiguration) as exc_info:
        Runner("bad", work, count=count)

    assert work.calls == 0
    assert "count" in str(exc_info.value)
    assert exc_info.value.name == "bad"


def test_non_integer_count_rejected():
    """Test that a float count is a configuration error."""
    with pytest.raises(InvalidConfiguration):
        Runner("bad", lambda: None, count=2.5)  # type: ignore[arg-type]


def test_warmup_adds_five_calls():
    """Test execute call counts with and without warmup."""
    warm = Counter()
    Runner("warm", warm, count=10).run_blocking()
    assert warm.calls == 10 + WARMUP_ITERATIONS == 15

    cold = Counter()
    Runner("cold", cold, count=10, warmup=False).run_blocking()
    assert cold.calls == 10


def test_setup_and_cleanup_called_once_in_order():
    """Test setup runs before warmup and cleanup after the timed loop."""
    events: list[str] = []

    Runner(
        "order",
        lambda: events.append("execute"),
        setup=lambda: events.append("setup"),
        cleanup=lambda: events.append("cleanup"),
        count=2,
    ).run_blocking()

    assert events[0] == "setup"
    assert events[-1] == "cleanup"
    assert events.count("setup") == 1
    assert events.count("cleanup") == 1
    assert events.count("execute") == 2 + WARMUP_ITERATIONS


def test_setup_and_cleanup_not_timed():
    """Test that slow setup/cleanup do not show up in measurements."""
    result = Runner(
        "untimed",
        lambda: None,
        setup=lambda: time.sleep(0.05),
        cleanup=lambda: time.sleep(0.05),
        count=5,
        warmup=False,
    ).run_blocking()

    assert result.peak < 50_000


def test_fixed_duration_work():
    """Test three 10ms executions."""
    result = Runner(
        "t", lambda: time.sleep(0.01), count=3, warmup=False
    ).run_blocking()

    assert len(result.measurements) == 3
    for value in result.measurements:
        assert 9_000 <= value < 1_000_000
    assert result.peak >= result.bottom
    assert result.bottom <= result.average <= result.peak


def test_execute_failure_aborts_run(sink):
    """Test that an error on iteration k skips cleanup and the summary."""
    calls = Counter()
    cleanup = Counter()

    def execute():
        calls()
        if calls.calls == 3:
            raise KeyError("boom")

    runner = Runner(
        "failing", execute, cleanup=cleanup, count=10, warmup=False, log=sink
    )
    with pytest.raises(KeyError, match="boom"):
        runner.run_blocking()

    assert calls.calls == 3
    assert cleanup.calls == 0
    assert "Benchmark done!" not in sink.messages


def test_setup_failure_propagates_unwrapped():
    """Test that setup errors reach the caller unchanged."""
    work = Counter()
    error = RuntimeError("setup failed")

    def setup():
        raise error

    with pytest.raises(RuntimeError) as exc_info:
        Runner("setup_fails", work, setup=setup).run_blocking()

    assert exc_info.value is error
    assert work.calls == 0


def test_cleanup_failure_propagates():
    """Test that cleanup errors propagate after the timed loop ran."""
    work = Counter()

    def cleanup():
        raise OSError("cleanup failed")

    with pytest.raises(OSError, match="cleanup failed"):
        Runner("cleanup_fails", work, cleanup=cleanup, count=4).run_blocking()

    assert work.calls == 4 + WARMUP_ITERATIONS


def test_progress_messages(sink):
    """Test levels and messages sent to the progress sink."""
    result = Runner(
        "progress", lambda: None, setup=lambda: None, count=2, log=sink
    ).run_blocking()

    assert sink.records == [
        (logging.INFO, "Start benchmarking."),
        (FINE, "Running setup."),
        (FINE, "Running 5 warmup test"),
        (FINE, "Executing code 2 times."),
        (logging.DEBUG, "Running test 1/2"),
        (logging.DEBUG, "Running test 2/2"),
        (FINE, "Running cleanup."),
        (FINE, "Benchmark done!"),
        (logging.INFO, result.render()),
    ]


def test_no_warmup_message_without_warmup(sink):
    """Test that the warmup phase is skipped entirely."""
    Runner("cold", lambda: None, count=1, warmup=False, log=sink).run_blocking()
    assert not any("warmup" in msg for msg in sink.messages)


def test_default_sink_is_package_logger(caplog):
    """Test that runners log under quickbench.<name> without configuration."""
    runner = Runner("defaults", lambda: None, count=1, warmup=False)
    assert runner.log is logging.getLogger("quickbench.defaults")

    with caplog.at_level(logging.DEBUG, logger="quickbench"):
        runner.run_blocking()

    assert "Start benchmarking." in caplog.messages
    assert "Running test 1/1" in caplog.messages


def test_from_config():
    """Test building a runner from a BenchmarkConfig."""
    config = BenchmarkConfig(name="cfg", count=4, warmup=False)
    work = Counter()
    runner = Runner.from_config(config, work)

    assert runner.name == "cfg"
    assert runner.count == 4
    assert runner.warmup is False
    assert runner.config == config

    runner.run_blocking()
    assert work.calls == 4


def test_defaults():
    """Test default count and warmup."""
    runner = Runner("defaults", lambda: None)
    assert runner.count == 100
    assert runner.warmup is True
    assert runner.setup is None
    assert runner.cleanup is None
    assert repr(runner) == "Runner(name='defaults', count=100, warmup=True)"


def test_runs_are_independent():
    """Test that each run builds a fresh ResultSet."""
    runner = Runner("twice", lambda: None, count=3, warmup=False)
    first = runner.run_blocking()
    second = runner.run_blocking()

    assert first is not second
    assert len(first) == len(second) == 3


def test_run_blocking_rejects_suspension(monkeypatch):
    """Test that a protocol which suspends is closed with an error."""
    executed = Counter()
    cleanup = Counter()

    async def suspending_invoke(work):
        await asyncio.sleep(0)
        work()

    monkeypatch.setattr(quickbench.runner, "_invoke_blocking", suspending_invoke)
    runner = Runner("suspends", executed, cleanup=cleanup, count=3, warmup=False)

    with pytest.raises(RuntimeError, match="suspended inside run_blocking"):
        runner.run_blocking()

    assert executed.calls == 0
    assert cleanup.calls == 0
