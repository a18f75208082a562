"""Parser error types."""

from __future__ import annotations


class MalformedInputError(ValueError):
    """Raised when stylesheet or selector text cannot be tokenized.

    Stream-level errors carry a 1-based ``line`` and ``column``; selector-level
    errors carry the ``source`` chain text instead. ``char`` is the offending
    character, or ``""`` when the input ended too early.
    """

    def __init__(
        self,
        char: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
    ):
        self.char = char
        self.line = line
        self.column = column
        self.source = source
        super().__init__(self._format())

    def _format(self) -> str:
        if self.char:
            what = f"Unexpected character {self.char!r}"
        else:
            what = "Unexpected end of input"
        if self.line is not None:
            return f"{what} at line {self.line}, column {self.column}"
        if self.source is not None:
            return f"{what} in {self.source!r}"
        return what
