"""Tree printer: render a rule tree as nested SCSS."""

from __future__ import annotations

from css2scss.model.tree import RuleTree

__all__ = ["print_rule_tree", "default_indent_size", "DEFAULT_INDENT_SIZE"]

DEFAULT_INDENT_SIZE = 4


def default_indent_size(indent_char: str) -> int:
    """One tab per level, otherwise four of *indent_char*."""
    return 1 if indent_char == "\t" else DEFAULT_INDENT_SIZE


def _selector(text: str, nested: bool) -> str:
    # Text without leading whitespace continues the parent compound
    # selector (".a.b", "a:hover"), which SCSS spells with "&".
    stripped = text.lstrip()
    if nested and stripped == text:
        return "&" + text
    return stripped


def _print_children(
    node: RuleTree, indent: str, depth: int, lines: list[str]
) -> None:
    pad = indent * depth
    for text, child in node.children.items():
        if node.properties:
            lines.append("")
        lines.append(f"{pad}{_selector(text, depth > 0)} {{")
        for decl in child.properties:
            lines.append(f"{pad}{indent}{decl}")
        _print_children(child, indent, depth + 1, lines)
        lines.append(f"{pad}}}")


def print_rule_tree(
    tree: RuleTree, indent_char: str = " ", indent_size: int | None = None
) -> str:
    """Render *tree* as nested rule blocks.

    The root itself is never printed, only its children. *indent_size*
    defaults to 4, or 1 when *indent_char* is a tab.
    """
    if indent_size is None:
        indent_size = default_indent_size(indent_char)
    lines: list[str] = []
    _print_children(tree, indent_char * indent_size, 0, lines)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
