"""Rule tree builder: fold a rule list into a prefix tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from css2scss.model.rule import Rule
from css2scss.model.tree import RuleTree

__all__ = ["create_rule_tree", "count_declarations"]

logger = logging.getLogger(__name__)


def create_rule_tree(rules: Iterable[Rule]) -> RuleTree:
    """Merge *rules* into a tree keyed by literal component text.

    Every selector chain of a rule gets its own copy of the rule's
    declarations at the node its path ends on. Declarations that reach the
    same node from several rules keep source order.
    """
    root = RuleTree()
    for rule in rules:
        for chain in rule.selectors:
            node = root
            for component in chain:
                node = node.child(component.text)
            node.properties.extend(rule.properties)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built rule tree: %d node(s), %d declaration(s)",
            sum(1 for _ in root.walk()),
            count_declarations(root),
        )
    return root


def count_declarations(tree: RuleTree) -> int:
    """Total number of declarations held by *tree* and all its descendants."""
    return len(tree.properties) + sum(
        count_declarations(child) for child in tree.children.values()
    )
