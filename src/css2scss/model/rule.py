"""Rule model: a flat CSS block and its declarations."""

from __future__ import annotations

from dataclasses import dataclass

from css2scss.model.component import SelectorChain


@dataclass(frozen=True)
class Declaration:
    """A property name/value pair. The value is kept verbatim."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value};"


@dataclass(frozen=True)
class Rule:
    """One flat CSS block: selector chains sharing one declaration list.

    Property names are not deduplicated; repeated names are kept in order.
    """

    selectors: tuple[SelectorChain, ...] = ()
    properties: tuple[Declaration, ...] = ()

    @property
    def fan_out(self) -> int:
        """Number of declarations this rule contributes to a rule tree."""
        return len(self.selectors) * len(self.properties)

    def to_dict(self) -> dict:
        return {
            "selectors": [
                [{"text": c.text, "kind": c.kind.value} for c in chain]
                for chain in self.selectors
            ],
            "properties": [
                {"name": d.name, "value": d.value} for d in self.properties
            ],
        }
