#!/usr/bin/env python3
"""quickbench CLI - Command-line interface for quickbench."""

import click

from quickbench.models.constants import DEFAULT_COUNT
from quickbench.utils.env import EnvVarTypeError, get_env
from quickbench.utils.logger import Logger


@click.group()
def quickbench():
    """quickbench: time a callable and report peak, bottom and average."""
    if not Logger.is_configured():
        level = get_env("QUICKBENCH_LOG_LEVEL", default="INFO")
        try:
            # stdout is reserved for results; progress goes to stderr
            Logger.configure(level=level, output="stderr", timestamps=True)
        except ValueError as e:
            raise click.UsageError(
                f"Invalid QUICKBENCH_LOG_LEVEL '{level}': expected one of "
                "DEBUG, FINE, INFO, WARNING, ERROR, CRITICAL"
            ) from e


@quickbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display quickbench version information."""
    from quickbench.commands.version_cmd import run_version

    run_version(verbose=verbose)


@quickbench.command()
@click.argument("target")
@click.option("--setup", default=None, help="module:attribute called once before timing")
@click.option(
    "--cleanup", default=None, help="module:attribute called once after timing"
)
@click.option(
    "--count",
    "-n",
    type=int,
    default=None,
    show_default=f"$QUICKBENCH_COUNT or {DEFAULT_COUNT}",
    help="Number of timed executions",
)
@click.option(
    "--warmup/--no-warmup",
    default=True,
    help="Run the target 5 untimed times first (default: on)",
)
@click.option(
    "--output",
    "-o",
    default="-",
    type=click.Path(dir_okay=False, allow_dash=True),
    help="Write results to file instead of stdout",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    help="Result format (default: text)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log each benchmark phase")
@click.option("--debug", is_flag=True, help="Log every iteration")
def run(target, setup, cleanup, count, warmup, output, output_format, verbose, debug):
    r"""Benchmark TARGET, a module:attribute callable.

    \b
    Examples:
      quickbench run mypkg.sorting:sort_small
      quickbench run mypkg.sorting:sort_small -n 1000 --no-warmup
      quickbench run mypkg.http:fetch --setup mypkg.http:connect -f json
    """
    from quickbench.commands.run_cmd import run_benchmark

    if count is None:
        try:
            count = get_env("QUICKBENCH_COUNT", default=DEFAULT_COUNT, as_type=int)
        except EnvVarTypeError as e:
            raise click.BadParameter(str(e), param_hint="'--count'") from e

    if debug:
        Logger.set_level("DEBUG")
    elif verbose:
        Logger.set_level("FINE")

    run_benchmark(target, setup, cleanup, count, warmup, output, output_format)


if __name__ == "__main__":
    quickbench()
