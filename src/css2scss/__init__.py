"""css2scss: convert flat CSS into nested SCSS."""

__version__ = "0.1.0"

from css2scss.config import ConvertConfig  # noqa: E402
from css2scss.convert import convert  # noqa: E402
from css2scss.model import (  # noqa: E402
    Component,
    ComponentKind,
    Declaration,
    Rule,
    RuleTree,
    SelectorChain,
)
from css2scss.parser import MalformedInputError, parse_rules, parse_selector  # noqa: E402
from css2scss.tree import create_rule_tree, print_rule_tree  # noqa: E402

__all__ = [
    "__version__",
    "convert",
    "ConvertConfig",
    "Component",
    "ComponentKind",
    "Declaration",
    "Rule",
    "RuleTree",
    "SelectorChain",
    "MalformedInputError",
    "parse_rules",
    "parse_selector",
    "create_rule_tree",
    "print_rule_tree",
]
