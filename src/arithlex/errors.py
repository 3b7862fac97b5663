"""Error types with formatted source context."""

from __future__ import annotations

from arithlex.tokens import Position


class LexError(Exception):
    """Raised by a strict scanner on the first unrecognised character."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<input>") -> str:
        line, col = self.position.line, self.position.column
        lines = self.source.split("\n")
        source_line = lines[line - 1].rstrip("\r") if line <= len(lines) else ""

        num = str(line)
        gutter = " " * len(num)
        return (
            f"error: {self.message}\n"
            f"{gutter} --> {filename}:{line}:{col}\n"
            f"{gutter} |\n"
            f"{num} | {source_line}\n"
            f"{gutter} | {' ' * (col - 1)}^"
        )
