"""CLI command: css2scss rules -- dump the parsed rule list as JSON."""

from __future__ import annotations

import json
import sys
from typing import TextIO

import click

from css2scss.parser import MalformedInputError, parse_rules


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"), default="-")
def rules(cssfile: TextIO) -> None:
    """Print the rules parsed from CSSFILE (or stdin) as JSON.

    Each rule lists its selector chains (components with text and kind)
    and its declarations in source order.
    """
    try:
        parsed = parse_rules(cssfile.read())
    except MalformedInputError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps([rule.to_dict() for rule in parsed], indent=4))
