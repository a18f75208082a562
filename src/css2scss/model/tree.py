"""Rule tree model: a prefix tree over selector components."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from css2scss.model.rule import Declaration


@dataclass
class RuleTree:
    """A node of the rule tree.

    ``children`` is keyed by the literal component text; dict insertion
    order is the first-seen order of each child. The root node stands for
    the empty selector path and never carries a selector of its own.
    """

    children: dict[str, RuleTree] = field(default_factory=dict)
    properties: list[Declaration] = field(default_factory=list)

    def child(self, text: str) -> RuleTree:
        """Return the child for *text*, creating it if it does not exist."""
        node = self.children.get(text)
        if node is None:
            node = RuleTree()
            self.children[text] = node
        return node

    def find(self, *path: str) -> RuleTree | None:
        """Follow *path* (component texts) from this node; None if absent."""
        node: RuleTree | None = self
        for text in path:
            if node is None:
                return None
            node = node.children.get(text)
        return node

    def walk(self, depth: int = 0) -> Iterator[tuple[int, str, RuleTree]]:
        """Yield ``(depth, text, node)`` for every descendant, depth-first."""
        for text, node in self.children.items():
            yield depth, text, node
            yield from node.walk(depth + 1)
