#!/usr/bin/env python3
"""Demo script timing a slow coroutine and a blocking function."""

import asyncio
import sys
import time

from quickbench import OutputFormat, Runner
from quickbench.utils.logger import Logger


async def slow_thingy():
    await asyncio.sleep(1)


def sort_thingy():
    sorted(range(100_000, 0, -1))


async def main():
    """Benchmark both work items and print their summaries."""
    Logger.configure(level="FINE", timestamps=False)

    print("=" * 60)
    print("Awaitable benchmark (3 runs, no warmup)")
    print("=" * 60)
    slow = Runner(
        "Slow Benchmark", slow_thingy, count=3, warmup=False,
        log=Logger.get("slow"),
    )
    await slow.run()

    print()
    print("=" * 60)
    print("Blocking benchmark (50 runs, with warmup)")
    print("=" * 60)
    sort = Runner(
        "Sort Benchmark", sort_thingy,
        setup=lambda: time.sleep(0.1),
        count=50,
        log=Logger.get("sort"),
    )
    result = sort.run_blocking()

    print()
    print("JSON Output:")
    result.emit(sys.stdout, sort.config, OutputFormat.JSON)


if __name__ == "__main__":
    asyncio.run(main())
