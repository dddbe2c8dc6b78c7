"""Reversible embedding of schema text in a JavaScript carrier document.

Hosts that only lint JavaScript see a ``.prisma`` file as::

    const __PRISMA_SCHEMA__ = String.raw`
    <escaped schema>
    `
    ;
    void __PRISMA_SCHEMA__;

The template literal holds the schema verbatim apart from three escapes
(``\\``, `````` ` ``````, ``${``) that would otherwise end the literal or start an
interpolation.  ``extract`` undoes ``wrap`` exactly and reports how many
lines precede the first schema line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SCHEMA_BINDING = "__PRISMA_SCHEMA__"

_PROLOGUE = f"const {SCHEMA_BINDING} = String.raw`\n"
_EPILOGUE = f"\n`\n;\nvoid {SCHEMA_BINDING};\n"

# Body is a run of escape pairs or plain characters, so an escaped backtick
# never terminates the literal.
_CARRIER_RE = re.compile(
    rf"{SCHEMA_BINDING}\s*=\s*String\.raw`((?:\\.|[^`\\])*)`\s*;?",
    re.DOTALL,
)
_ESCAPE_RE = re.compile(r"\\|`|\$\{")
_UNESCAPE_RE = re.compile(r"\\(\\|`|\$\{)")

PRISMA_SUFFIX = ".prisma"


@dataclass(frozen=True)
class ExtractedSchema:
    """Schema text recovered from a host document."""

    schema_text: str
    line_offset: int = 0
    wrapped: bool = False


def escape(text: str) -> str:
    """Escape *text* for embedding inside the ``String.raw`` literal."""
    return _ESCAPE_RE.sub(lambda match: "\\" + match.group(0), text)


def unescape(text: str) -> str:
    return _UNESCAPE_RE.sub(lambda match: match.group(1), text)


def wrap(schema_text: str) -> str:
    """Embed *schema_text* in a carrier document."""
    return f"{_PROLOGUE}{escape(schema_text)}{_EPILOGUE}"


def extract(source_text: str) -> ExtractedSchema:
    """Recover schema text from a carrier document.

    Input without the carrier binding is taken to be raw schema text.
    """
    match = _CARRIER_RE.search(source_text)
    if match is None:
        return ExtractedSchema(schema_text=source_text)

    body = match.group(1)
    content_start = match.start(1)
    if body.startswith("\n"):
        body = body[1:]
        content_start += 1
    elif body.startswith("\r\n"):
        body = body[2:]
        content_start += 2
    if body.endswith("\n"):
        body = body[:-1]

    return ExtractedSchema(
        schema_text=unescape(body),
        line_offset=source_text.count("\n", 0, content_start),
        wrapped=True,
    )


def host_column(line_text: str, column: int) -> int:
    """Column in the escaped carrier line of a raw-schema column."""
    return len(escape(line_text[:column]))


def is_schema_filename(filename: str) -> bool:
    """True for ``.prisma`` files and carrier files such as ``schema.prisma.js``."""
    return filename.endswith(PRISMA_SUFFIX) or PRISMA_SUFFIX in filename


class CarrierProcessor:
    """Pre/post-processing hooks for hosts that only understand JavaScript.

    ``preprocess`` turns a ``.prisma`` file into a single carrier block;
    ``postprocess`` flattens the per-block message lists the host returns.
    """

    name = "prisma-schema-processor"
    supports_autofix = False

    def preprocess(self, text: str, filename: str) -> list[tuple[str, str]]:
        if not filename.endswith(PRISMA_SUFFIX):
            return [(text, filename)]
        return [(wrap(text), filename)]

    def postprocess(self, messages: list[list[object]], filename: str) -> list[object]:
        return [message for block in messages for message in block]
