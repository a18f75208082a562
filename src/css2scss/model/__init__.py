"""css2scss model layer -- public type re-exports."""

from css2scss.model.component import Component, ComponentKind, SelectorChain
from css2scss.model.rule import Declaration, Rule
from css2scss.model.tree import RuleTree

__all__ = [
    # component
    "ComponentKind",
    "Component",
    "SelectorChain",
    # rule
    "Declaration",
    "Rule",
    # tree
    "RuleTree",
]
