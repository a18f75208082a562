"""One-shot CSS to SCSS conversion."""

from __future__ import annotations

import logging

from css2scss.config import ConvertConfig
from css2scss.parser import parse_rules
from css2scss.tree import create_rule_tree, print_rule_tree

__all__ = ["convert"]

logger = logging.getLogger(__name__)


def convert(source: str, config: ConvertConfig | None = None) -> str:
    """Parse flat CSS, merge it into a rule tree and print it as SCSS.

    Raises :class:`~css2scss.parser.MalformedInputError` on invalid input;
    nothing is returned in that case.
    """
    config = config or ConvertConfig()
    rules = parse_rules(source)
    tree = create_rule_tree(rules)
    output = print_rule_tree(tree, config.indent_char, config.resolved_indent_size)
    logger.debug("Converted %d rule(s) into %d character(s)", len(rules), len(output))
    return output
