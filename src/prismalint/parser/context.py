"""Builds the per-document schema context shared by all lint rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from prismalint.exceptions import SchemaParseError
from prismalint.models.dmmf import DmmfDocument
from prismalint.parser.carrier import extract
from prismalint.parser.dmmf import SchemaParser
from prismalint.parser.locator import SchemaLocator, build_locator

logger = logging.getLogger("prismalint.parser")


@dataclass(frozen=True)
class SchemaContext:
    """Everything rules need to check one document.

    ``source_text`` is the host document (raw schema or carrier),
    ``schema_text`` the extracted schema, ``line_offset`` the number of
    carrier lines preceding the schema.
    """

    source_text: str
    schema_text: str
    line_offset: int
    wrapped: bool
    locator: SchemaLocator
    document: DmmfDocument


class SchemaContextBuilder:
    """Extract, parse and locate a schema in one step."""

    def __init__(self, parser: SchemaParser) -> None:
        self._parser = parser

    def build(self, source_text: str) -> SchemaContext | None:
        """Return the context for *source_text*, or None if the schema does not parse.

        A schema that is mid-edit is routinely invalid, so a parse failure
        means "nothing to check" rather than an error.
        """
        extracted = extract(source_text)
        try:
            document = self._parser(extracted.schema_text)
        except SchemaParseError as exc:
            logger.debug("No schema context: %s", exc)
            return None
        return SchemaContext(
            source_text=source_text,
            schema_text=extracted.schema_text,
            line_offset=extracted.line_offset,
            wrapped=extracted.wrapped,
            locator=build_locator(extracted.schema_text),
            document=document,
        )
