"""CLI command: css2scss convert -- print a CSS file as nested SCSS."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from css2scss.config import ConvertConfig
from css2scss.convert import convert as run_convert
from css2scss.parser import MalformedInputError


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--tabs", is_flag=True, help="Indent with one tab per level")
@click.option(
    "--indent-size",
    type=click.IntRange(min=0),
    default=None,
    help="Indent characters per level (default: 4 spaces or 1 tab)",
)
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Write to this file instead of stdout",
)
def convert(
    cssfile: TextIO, tabs: bool, indent_size: int | None, output: TextIO
) -> None:
    """Convert CSSFILE (or stdin) into nested SCSS."""
    config = ConvertConfig(indent_char="\t" if tabs else " ", indent_size=indent_size)

    try:
        result = run_convert(cssfile.read(), config)
    except MalformedInputError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(result, file=output, nl=False)
