"""Source position tracking for sdw diagnostics and lexemes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PositionInfo:
    """A span in sdw source code.

    ``line`` and ``column`` are 0-indexed; ``length`` is the span width in
    characters.  Diagnostics raised at end of input point one past the end of
    the buffer.
    """

    line: int
    column: int
    length: int = 1

    def __post_init__(self) -> None:
        if self.line < 0 or self.column < 0 or self.length < 0:
            raise ValueError(
                f"position fields must be non-negative, got "
                f"line={self.line} column={self.column} length={self.length}"
            )

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"
