"""CLI command: css2scss inspect -- display rule tree structure."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from css2scss.parser import MalformedInputError, parse_rules
from css2scss.tree import count_declarations, create_rule_tree


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"), default="-")
def inspect(cssfile: TextIO) -> None:
    """Parse CSSFILE (or stdin) and display its merged rule tree.

    Shows rule, selector and declaration counts, then one line per tree
    node with the number of declarations it carries.
    """
    try:
        parsed = parse_rules(cssfile.read())
    except MalformedInputError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    tree = create_rule_tree(parsed)

    click.echo(f"Rules:        {len(parsed)}")
    click.echo(f"Selectors:    {sum(len(r.selectors) for r in parsed)}")
    click.echo(f"Declarations: {count_declarations(tree)}")
    click.echo()

    click.echo("Tree:")
    for depth, text, node in tree.walk():
        line = f"  {'  ' * depth}{text.strip()}"
        if node.properties:
            line += f"  ({len(node.properties)})"
        click.echo(line)
