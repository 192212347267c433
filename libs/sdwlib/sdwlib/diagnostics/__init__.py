"""sdw diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from sdwlib.diagnostics.errors import ErrorPayload, InternalDiagnosticError, ShadowError
from sdwlib.diagnostics.location import PositionInfo
from sdwlib.diagnostics.render import render_diagnostic
from sdwlib.diagnostics.stage import ErrorStage

__all__ = [
    "PositionInfo",
    "ErrorStage",
    "ErrorPayload",
    "ShadowError",
    "InternalDiagnosticError",
    "render_diagnostic",
]
