"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from arithlex.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token with its position to *file*."""
    for tok in tokens:
        pos = tok.position
        file.write(f"{pos.line}:{pos.column} [{pos.offset}] {tok.type.name} {tok.lexeme!r}\n")
