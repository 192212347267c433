"""Stage-tagged, positioned error values for sdw."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from sdwlib.diagnostics.location import PositionInfo
from sdwlib.diagnostics.stage import ErrorStage


class ErrorPayload(ABC):
    """Base type for typed error payloads. Concrete subclasses are frozen dataclasses."""

    stage: ClassVar[ErrorStage]

    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the error."""


class InternalDiagnosticError(RuntimeError):
    """Raised when a diagnostic does not fit the source it is rendered against.

    This signals a defect in the diagnostic pipeline, never bad user input,
    so it is deliberately not a :class:`ShadowError`.
    """


class ShadowError(Exception):
    """A user-facing error raised by one compiler stage at one source span."""

    def __init__(self, payload: ErrorPayload, pos: PositionInfo) -> None:
        super().__init__(payload.message())
        self.payload = payload
        self.pos = pos

    @classmethod
    def new(cls, payload: ErrorPayload, line: int, column: int, length: int) -> ShadowError:
        """Build an error from raw 0-indexed coordinates."""
        return cls(payload, PositionInfo(line, column, length))

    @classmethod
    def from_pos(cls, payload: ErrorPayload, pos: PositionInfo) -> ShadowError:
        """Build an error at an existing position."""
        return cls(payload, pos)

    @property
    def stage(self) -> ErrorStage:
        return self.payload.stage

    @property
    def message(self) -> str:
        return self.payload.message()

    def __str__(self) -> str:
        return (
            f"[SDW E/{self.stage}]\n"
            f"{self.message}\n"
            f"error occurred at line {self.pos.line + 1}, "
            f"character {self.pos.column + 1}.\n"
        )

    def __repr__(self) -> str:
        return f"ShadowError({self.payload!r}, {self.pos!r})"

    def verbose(self, source: str) -> str:
        """Return the offending source line with the span underlined by carets.

        Raises:
            InternalDiagnosticError: If ``source`` has no line ``pos.line``.
        """
        lines = source.split("\n")
        if self.pos.line >= len(lines):
            raise InternalDiagnosticError(
                f"an error was reported on line {self.pos.line + 1}, "
                f"but the source only has {len(lines)} line(s)"
            )
        marker = " " * self.pos.column + "^" * self.pos.length
        return (
            "[ .. ]\n"
            f"{lines[self.pos.line]}\n"
            f"{marker} - error occurred here!\n"
            "[ .. ]\n"
        )
