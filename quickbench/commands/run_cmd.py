"""Run command - benchmark a callable named on the command line.

CLI Examples:
    quickbench run mypkg.sorting:sort_small                 # 100 runs, warmup on
    quickbench run mypkg.sorting:sort_small -n 1000 --no-warmup
    quickbench run mypkg.http:fetch --setup mypkg.http:connect --cleanup mypkg.http:close
    quickbench run mypkg.sorting:sort_small -f json -o results.json
"""

import asyncio
import importlib
import inspect
import sys
from typing import Any

import click

from quickbench.errors import InvalidConfiguration
from quickbench.results import OutputFormat
from quickbench.runner import Runner, WorkItem
from quickbench.utils.logger import Logger


def resolve_work_item(reference: str, option: str) -> WorkItem:
    """Import ``module:attribute`` and return the callable it names.

    Args:
        reference: Dotted module path and attribute, e.g. ``"pkg.mod:func"``.
            Nested attributes are allowed (``"pkg.mod:Class.method"``).
        option: Name of the CLI parameter, for error messages.

    Raises:
        click.BadParameter: If the reference is malformed, cannot be
            imported, or does not name a callable.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(
            f"'{reference}' is not in module:attribute form", param_hint=option
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"cannot import module '{module_name}': {e}", param_hint=option
        ) from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise click.BadParameter(
                f"'{module_name}' has no attribute '{attr_path}'", param_hint=option
            ) from e

    if not callable(target):
        raise click.BadParameter(f"'{reference}' is not callable", param_hint=option)
    work: WorkItem = target
    return work


def _is_async(*items: WorkItem | None) -> bool:
    """True if any item is a coroutine function or has an ``async def __call__``."""
    return any(
        inspect.iscoroutinefunction(item)
        or inspect.iscoroutinefunction(getattr(item, "__call__", None))
        for item in items
        if item is not None
    )


def run_benchmark(
    target: str,
    setup: str | None,
    cleanup: str | None,
    count: int,
    warmup: bool,
    output: str,
    output_format: str,
) -> None:
    """Resolve work items, run the benchmark and emit its results.

    Coroutine functions are run on a fresh event loop with ``Runner.run``;
    everything else goes through ``Runner.run_blocking``.
    """
    execute = resolve_work_item(target, "TARGET")
    setup_item = resolve_work_item(setup, "--setup") if setup else None
    cleanup_item = resolve_work_item(cleanup, "--cleanup") if cleanup else None

    name = target.rpartition(":")[2]
    try:
        runner = Runner(
            name,
            execute,
            setup=setup_item,
            cleanup=cleanup_item,
            count=count,
            warmup=warmup,
            log=Logger.get(name),
        )
    except InvalidConfiguration as e:
        raise click.ClickException(str(e)) from e

    if _is_async(execute, setup_item, cleanup_item):
        result = asyncio.run(runner.run())
    else:
        result = runner.run_blocking()

    fmt = OutputFormat(output_format)
    if output == "-":
        result.emit(sys.stdout, runner.config, fmt)
    else:
        result.emit(output, runner.config, fmt)
        click.echo(f"Results written to {output}", err=True)
