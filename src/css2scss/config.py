"""Conversion settings."""

from __future__ import annotations

from dataclasses import dataclass

from css2scss.tree.printer import default_indent_size


@dataclass(frozen=True)
class ConvertConfig:
    indent_char: str = " "
    indent_size: int | None = None  # None: 4 for spaces, 1 for tab

    def __post_init__(self) -> None:
        if len(self.indent_char) != 1:
            raise ValueError("indent_char must be a single character")
        if self.indent_size is not None and self.indent_size < 0:
            raise ValueError("indent_size must not be negative")

    @property
    def resolved_indent_size(self) -> int:
        if self.indent_size is None:
            return default_indent_size(self.indent_char)
        return self.indent_size

    @property
    def indent(self) -> str:
        """The indent string for one nesting level."""
        return self.indent_char * self.resolved_indent_size
