"""Schema extraction, position tracking and coordinate translation."""

from prismalint.parser.carrier import CarrierProcessor, ExtractedSchema, extract, wrap
from prismalint.parser.context import SchemaContext, SchemaContextBuilder
from prismalint.parser.dmmf import NodeDmmfParser, SchemaParser, parse_dmmf
from prismalint.parser.locator import EntityKind, LocatedEntity, SchemaLocator, build_locator
from prismalint.parser.translator import PositionTranslator

__all__ = [
    "CarrierProcessor",
    "EntityKind",
    "ExtractedSchema",
    "LocatedEntity",
    "NodeDmmfParser",
    "PositionTranslator",
    "SchemaContext",
    "SchemaContextBuilder",
    "SchemaLocator",
    "SchemaParser",
    "build_locator",
    "extract",
    "parse_dmmf",
    "wrap",
]
