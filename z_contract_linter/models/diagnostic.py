"""Source positions and diagnostics produced by analyzers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class Position:
    """A location in a Go source file.

    Ordering is by ``(filename, offset)``; line and column are derived from
    the same point and do not take part in comparisons.
    """

    filename: str
    offset: int  # byte offset from start of file
    line: int = field(compare=False)  # 1-based
    column: int = field(compare=False)  # 1-based, in bytes

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
    """A (position, message) finding reported to the host."""

    position: Position
    message: str
    analyzer: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.position.filename,
            "line": self.position.line,
            "column": self.position.column,
            "message": self.message,
            "analyzer": self.analyzer,
        }
