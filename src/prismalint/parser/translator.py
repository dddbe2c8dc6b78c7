"""Coordinate translation from locator positions to host positions and ranges.

Locator positions refer to the raw schema text.  The host document may be a
carrier that shifts every schema line down by ``line_offset`` lines and
inserts escape characters, so reports and fix ranges are translated before
they leave the core.  Offsets are Python string indices into the host text.
"""

from __future__ import annotations

import bisect
import re
from typing import TYPE_CHECKING

from prismalint.models.positions import ReportLocation, SourcePosition
from prismalint.parser.carrier import host_column

if TYPE_CHECKING:
    from prismalint.parser.context import SchemaContext

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_MAP_VALUE_RE = re.compile(r'@{1,2}map\(\s*(?:name\s*:\s*)?"([^"]*)"\s*\)')

Range = tuple[int, int]


def apply_line_offset(position: SourcePosition, offset: int) -> SourcePosition:
    return SourcePosition(line=position.line + offset, column=position.column)


def to_report_range(position: SourcePosition, length: int = 1) -> ReportLocation:
    """Span *length* characters from *position* (one character by default)."""
    return ReportLocation(
        start=position,
        end=SourcePosition(line=position.line, column=position.column + length),
    )


def line_starts(text: str) -> list[int]:
    """Offsets at which each line of *text* begins (index 0 is line 1)."""
    starts = [0]
    starts.extend(match.end() for match in re.finditer("\n", text))
    return starts


def line_info(text: str, line: int, starts: list[int] | None = None) -> tuple[int, str]:
    """Return ``(line_start, line_text)`` for a 1-based *line*.

    Lines past the end resolve to an empty line at the end of *text*.
    """
    if starts is None:
        starts = line_starts(text)
    if line < 1 or line > len(starts):
        return len(text), ""
    start = starts[line - 1]
    end = starts[line] - 1 if line < len(starts) else len(text)
    return start, text[start:end].rstrip("\r")


def byte_range(
    text: str,
    position: SourcePosition,
    length: int,
    starts: list[int] | None = None,
) -> Range:
    """Absolute ``[start, end)`` offsets of a token at *position* in *text*."""
    line_start, _ = line_info(text, position.line, starts)
    start = line_start + position.column
    return start, start + length


def alias_value_range(text: str, line: int, starts: list[int] | None = None) -> Range | None:
    """Offsets of the quoted ``@map``/``@@map`` value on *line*, quotes excluded.

    Returns None when the attribute is not on that line.
    """
    line_start, line_text = line_info(text, line, starts)
    match = _MAP_VALUE_RE.search(line_text)
    if match is None:
        return None
    return line_start + match.start(1), line_start + match.end(1)


def position_at(text: str, offset: int, starts: list[int] | None = None) -> SourcePosition:
    """Inverse of :func:`byte_range`: the position of *offset* in *text*."""
    if starts is None:
        starts = line_starts(text)
    index = bisect.bisect_right(starts, offset) - 1
    return SourcePosition(line=index + 1, column=offset - starts[index])


class PositionTranslator:
    """Translates locator positions of one analysed document.

    Knows the raw schema text, the host text and the carrier line offset,
    and caches the line-start index of both texts.
    """

    def __init__(self, context: SchemaContext) -> None:
        self._context = context
        self._schema_lines = _LINE_SPLIT_RE.split(context.schema_text)
        self._host_starts = line_starts(context.source_text)

    @property
    def line_offset(self) -> int:
        return self._context.line_offset

    def to_host(self, position: SourcePosition) -> SourcePosition:
        """Map a raw-schema position into host-document coordinates."""
        host = apply_line_offset(position, self._context.line_offset)
        if not self._context.wrapped:
            return host
        index = position.line - 1
        if 0 <= index < len(self._schema_lines):
            column = host_column(self._schema_lines[index], position.column)
            host = SourcePosition(line=host.line, column=column)
        return host

    def report_location(self, position: SourcePosition, length: int = 1) -> ReportLocation:
        return to_report_range(self.to_host(position), length)

    def name_range(self, position: SourcePosition, length: int) -> Range:
        """Host-text offsets of a declared name at *position*."""
        return byte_range(
            self._context.source_text, self.to_host(position), length, self._host_starts
        )

    def alias_range(self, alias_position: SourcePosition) -> Range | None:
        """Host-text offsets of the alias value whose attribute is at *alias_position*."""
        host_line = alias_position.line + self._context.line_offset
        return alias_value_range(self._context.source_text, host_line, self._host_starts)
