"""Selector component model: one compound-selector segment of a chain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ComponentKind(Enum):
    """What a component selects on."""

    TAG = "tag"
    ID = "id"
    CLASS = "class"
    PSEUDO_CLASS = "pclass"
    ATTRIBUTE = "attribute"


@dataclass(frozen=True)
class Component:
    """A single selector component, e.g. ``.header`` or `` > nav``.

    ``text`` is the verbatim source text, including any combinator or
    whitespace that preceded the component's own marker character.
    """

    text: str
    kind: ComponentKind

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Component text must be a non-empty string")


# One comma-separated alternative of a selector list, in source order.
SelectorChain = tuple[Component, ...]
