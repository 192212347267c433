"""Compiler stages that can raise a diagnostic."""

from __future__ import annotations

from enum import Enum


class ErrorStage(Enum):
    """Stage a diagnostic originates from, keyed by its one-letter tag."""

    LEXICAL = "L"
    SYNTACTIC = "P"
    SEMANTIC = "S"

    def __str__(self) -> str:
        return self.value
