"""css2scss CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from css2scss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css2scss")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """css2scss - convert flat CSS stylesheets into nested SCSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from css2scss.cli.convert import convert  # noqa: E402
from css2scss.cli.inspect import inspect  # noqa: E402
from css2scss.cli.rules import rules  # noqa: E402

cli.add_command(convert)
cli.add_command(rules)
cli.add_command(inspect)
