"""Stylesheet tokenizer: a character-level state machine over flat CSS.

Grammar (no at-rules, comments, escapes or nesting):
    <selector> [, <selector>]* { <name>: <value>; ... }

Each selector chain is handed to :func:`parse_selector` as soon as it ends.
"""

from __future__ import annotations

import logging
import string
from enum import Enum

from css2scss.model.component import SelectorChain
from css2scss.model.rule import Declaration, Rule
from css2scss.parser.errors import MalformedInputError
from css2scss.parser.selector import parse_selector

__all__ = ["parse_rules"]

logger = logging.getLogger(__name__)

_ALNUM = frozenset(string.ascii_letters + string.digits)
_WHITESPACE = frozenset(" \t\r\n")
_SELECTOR_CHARS = _ALNUM | _WHITESPACE | frozenset(".-+>*#:=()[]\"'~_^$|")
_PROPERTY_CHARS = _ALNUM | frozenset("-")


class _State(Enum):
    TOP = "top"
    SELECTOR = "selector"
    SELECTOR_COMMA = "selector_comma"
    IN_BLOCK = "in_block"
    PROPERTY_NAME = "property_name"
    PROPERTY_NAME_TRAILING_SPACE = "property_name_trailing_space"
    PROPERTY_COLON = "property_colon"
    PROPERTY_VALUE = "property_value"


def _chain(selector: str) -> SelectorChain:
    return tuple(parse_selector(selector.strip()))


def parse_rules(source: str) -> list[Rule]:
    """Parse flat CSS text into rules, in source order.

    Raises :class:`MalformedInputError` with the offending character and its
    1-based line/column, or with ``char == ""`` if the input ends inside a
    selector or block. Errors from :func:`parse_selector` propagate as is.
    """
    rules: list[Rule] = []
    state = _State.TOP
    line = column = 1

    selector = ""
    chains: list[SelectorChain] = []
    name = value = ""
    properties: list[Declaration] = []

    for c in source:
        if state is _State.TOP:
            if c in _WHITESPACE:
                pass
            elif c in _SELECTOR_CHARS:
                selector = c
                state = _State.SELECTOR
            elif c == "{":
                state = _State.IN_BLOCK
            else:
                raise MalformedInputError(c, line, column)

        elif state is _State.SELECTOR:
            # whitespace is a selector character: descendant combinator
            if c in _SELECTOR_CHARS:
                selector += c
            elif c == ",":
                chains.append(_chain(selector))
                state = _State.SELECTOR_COMMA
            elif c == "{":
                chains.append(_chain(selector))
                state = _State.IN_BLOCK
            else:
                raise MalformedInputError(c, line, column)

        elif state is _State.SELECTOR_COMMA:
            if c in _WHITESPACE:
                pass
            elif c in _SELECTOR_CHARS:
                selector = c
                state = _State.SELECTOR
            else:
                raise MalformedInputError(c, line, column)

        elif state is _State.IN_BLOCK:
            if c in _WHITESPACE:
                pass
            elif c in _PROPERTY_CHARS:
                name = c
                state = _State.PROPERTY_NAME
            elif c == "}":
                rules.append(Rule(tuple(chains), tuple(properties)))
                chains, properties = [], []
                state = _State.TOP
            else:
                raise MalformedInputError(c, line, column)

        elif state is _State.PROPERTY_NAME:
            if c in _PROPERTY_CHARS:
                name += c
            elif c in _WHITESPACE:
                state = _State.PROPERTY_NAME_TRAILING_SPACE
            elif c == ":":
                state = _State.PROPERTY_COLON
            else:
                raise MalformedInputError(c, line, column)

        elif state is _State.PROPERTY_NAME_TRAILING_SPACE:
            if c in _WHITESPACE:
                pass
            elif c == ":":
                state = _State.PROPERTY_COLON
            else:
                raise MalformedInputError(c, line, column)

        elif state is _State.PROPERTY_COLON:
            if c in _WHITESPACE:
                pass
            elif c == "}":
                properties.append(Declaration(name, ""))
                rules.append(Rule(tuple(chains), tuple(properties)))
                chains, properties = [], []
                state = _State.TOP
            elif c == ";":
                properties.append(Declaration(name, ""))
                state = _State.IN_BLOCK
            else:
                value = c
                state = _State.PROPERTY_VALUE

        elif state is _State.PROPERTY_VALUE:
            if c == "}":
                properties.append(Declaration(name, value))
                rules.append(Rule(tuple(chains), tuple(properties)))
                chains, properties = [], []
                state = _State.TOP
            elif c == ";":
                properties.append(Declaration(name, value))
                state = _State.IN_BLOCK
            else:
                value += c

        if c == "\n":
            line += 1
            column = 1
        else:
            column += 1

    if state is not _State.TOP:
        raise MalformedInputError("", line, column)

    logger.debug("Parsed %d rule(s) over %d line(s)", len(rules), line)
    return rules
