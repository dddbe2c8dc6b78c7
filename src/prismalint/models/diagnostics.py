"""Diagnostic models emitted by lint rules."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from prismalint.models.positions import DOCUMENT_ROOT, ReportLocation


class Severity(StrEnum):
    OFF = "off"
    WARN = "warn"
    ERROR = "error"


class Fix(BaseModel):
    """Replace ``text[range[0]:range[1]]`` of the linted document with ``text``.

    ``safe`` fixes rewrite only a ``@map``/``@@map`` value.  Renaming a
    declared name would leave every reference to it dangling, so such fixes
    are offered as suggestions and never applied automatically.
    """

    range: tuple[int, int]
    text: str
    safe: bool = False


class Suggestion(BaseModel):
    """An optional rename offered alongside a diagnostic."""

    message_id: str
    desc: str
    fix: Fix


class Diagnostic(BaseModel):
    """A single lint finding, positioned in host-document coordinates."""

    rule: str
    message_id: str
    message: str
    severity: Severity = Severity.ERROR
    location: ReportLocation = DOCUMENT_ROOT
    data: dict[str, str] = {}
    suggestions: list[Suggestion] = []

    @property
    def line(self) -> int:
        return self.location.start.line

    @property
    def column(self) -> int:
        return self.location.start.column
