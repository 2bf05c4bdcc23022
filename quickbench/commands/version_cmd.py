"""
Version command - displays quickbench version information
"""

import click

from quickbench.version import QUICKBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display quickbench version information.

    Args:
        verbose: If True, also show the package hash and build date
    """
    if not verbose:
        click.echo(f"quickbench {QUICKBENCH_VERSION}")
        return

    click.echo(f"quickbench version {QUICKBENCH_VERSION.full_version()}")
    click.echo("\nDetailed version information:")
    click.echo(f"  Semantic Version: {'.'.join(map(str, QUICKBENCH_VERSION.semver()))}")
    click.echo(f"  Build Date:       {QUICKBENCH_VERSION.date_string()}")
    click.echo(f"  Package Hash:     {QUICKBENCH_VERSION.hash}")
