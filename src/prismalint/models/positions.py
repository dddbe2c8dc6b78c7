"""Source positions used by the locator, translator and diagnostics."""

from __future__ import annotations

from pydantic import BaseModel


class SourcePosition(BaseModel):
    """A point in a text buffer: 1-based line, 0-based column.

    Positions produced by the locator refer to the raw schema text; the
    translator turns them into host-document positions.
    """

    line: int
    column: int

    model_config = {"frozen": True}


class ReportLocation(BaseModel):
    """Start/end span handed to the host for display."""

    start: SourcePosition
    end: SourcePosition

    model_config = {"frozen": True}


DOCUMENT_ROOT = ReportLocation(
    start=SourcePosition(line=1, column=0),
    end=SourcePosition(line=1, column=0),
)
