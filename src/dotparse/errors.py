"""Parser error types."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when DOT source does not match the grammar.

    ``position`` is the 0-based offset of the furthest point the parser
    reached; ``line`` and ``column`` are 1-based. ``expected`` lists what
    would have allowed parsing to continue there.
    """

    def __init__(
        self,
        position: int,
        expected: tuple[str, ...],
        line: int,
        column: int,
        found: str | None = None,
    ) -> None:
        self.position = position
        self.expected = expected
        self.line = line
        self.column = column
        self.found = found
        super().__init__(self._format())

    @classmethod
    def at(cls, src: str, position: int, expected: set[str] | tuple[str, ...]) -> ParseError:
        line = src.count("\n", 0, position) + 1
        column = position - (src.rfind("\n", 0, position) + 1) + 1
        found = src[position] if position < len(src) else None
        return cls(position, tuple(sorted(expected)), line, column, found)

    def _format(self) -> str:
        if not self.expected:
            wanted = "valid input"
        elif len(self.expected) == 1:
            wanted = self.expected[0]
        else:
            wanted = ", ".join(self.expected[:-1]) + " or " + self.expected[-1]
        found = "end of input" if self.found is None else repr(self.found)
        return f"line {self.line}, column {self.column}: expected {wanted} (found {found})"
