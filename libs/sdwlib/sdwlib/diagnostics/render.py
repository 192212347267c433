"""User-facing rendering of sdw diagnostics."""

from __future__ import annotations

from sdwlib.diagnostics.errors import ShadowError


def render_diagnostic(error: ShadowError, source: str) -> str:
    """Format *error* as a multi-line block with a caret excerpt of *source*.

    The stage tag, message and 1-indexed position come first, followed by the
    offending line.  Output depends only on the arguments.
    """
    return f"{error}{error.verbose(source)}"
