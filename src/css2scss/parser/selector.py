"""Selector decomposer: split one selector chain into components.

Examples:
    .header.mobile        -> ".header", ".mobile"
    .header > nav         -> ".header", " > nav"
    .button:not(:active)  -> ".button", ":not(:active)"
    a[href^="http"]       -> "a", '[href^="http"]'

Order and source text are preserved exactly; whitespace and combinators
that precede a component become part of that component's text.
"""

from __future__ import annotations

import string
from enum import Enum

from css2scss.model.component import Component, ComponentKind
from css2scss.parser.errors import MalformedInputError

__all__ = ["parse_selector"]

_IDENT = frozenset(string.ascii_letters + string.digits + "-_")
_COMBINATORS = frozenset("+~>")
_MARKERS = {
    "#": ComponentKind.ID,
    ".": ComponentKind.CLASS,
    ":": ComponentKind.PSEUDO_CLASS,
}
_QUOTES = "'\""


class _State(Enum):
    DELIM = "delim"
    COMPONENT = "component"
    PSEUDO_ARGS = "pseudo_args"
    ATTRIBUTE = "attribute"


def _ends_component(c: str) -> bool:
    return c.isspace() or c in _MARKERS or c in _COMBINATORS or c == "["


def parse_selector(source: str) -> list[Component]:
    """Decompose a trimmed selector chain into its ordered components.

    Raises :class:`MalformedInputError` (with ``source`` set) on a character
    that has no valid transition, a dangling marker or combinator, or an
    unterminated attribute selector or pseudo-class argument list.
    """
    components: list[Component] = []
    state = _State.DELIM
    kind = ComponentKind.TAG
    prefix = ""  # whitespace, combinators and marker before the name
    body = ""
    quote = ""

    i = 0
    while i < len(source):
        c = source[i]

        if state is _State.DELIM:
            if c.isspace() or c in _COMBINATORS:
                prefix += c
            elif c in _MARKERS:
                kind = _MARKERS[c]
                prefix += c
                state = _State.COMPONENT
            elif c == "[":
                kind = ComponentKind.ATTRIBUTE
                prefix += c
                state = _State.ATTRIBUTE
            elif c in _IDENT or c == "*":
                kind = ComponentKind.TAG
                body = c
                state = _State.COMPONENT
            else:
                raise MalformedInputError(c, source=source)

        elif state is _State.COMPONENT:
            if c in _IDENT:
                body += c
            elif (
                c == ":"
                and kind is ComponentKind.PSEUDO_CLASS
                and not body
                and not prefix.endswith("::")
            ):
                # pseudo-element, e.g. ::before
                prefix += c
            elif c == "(" and kind is ComponentKind.PSEUDO_CLASS and body:
                body += c
                state = _State.PSEUDO_ARGS
            elif _ends_component(c):
                if not body:
                    raise MalformedInputError(c, source=source)
                components.append(Component(prefix + body, kind))
                prefix = body = ""
                state = _State.DELIM
                continue  # re-process the delimiter
            else:
                raise MalformedInputError(c, source=source)

        elif state is _State.PSEUDO_ARGS:
            # no nested parentheses
            body += c
            if c == ")":
                state = _State.COMPONENT

        elif state is _State.ATTRIBUTE:
            if quote:
                if c == quote:
                    quote = ""
                body += c
            elif c in _QUOTES:
                quote = c
                body += c
            elif c == "[":
                raise MalformedInputError(c, source=source)
            elif c == "]":
                if not body:
                    raise MalformedInputError(c, source=source)
                components.append(Component(prefix + body + c, kind))
                prefix = body = ""
                state = _State.DELIM
            else:
                body += c

        i += 1

    if state is _State.COMPONENT and body:
        components.append(Component(prefix + body, kind))
    elif state is not _State.DELIM or prefix.strip():
        raise MalformedInputError("", source=source)

    return components
