"""Pydantic value types for prismalint."""

from prismalint.models.diagnostics import Diagnostic, Fix, Severity, Suggestion
from prismalint.models.dmmf import (
    Datamodel,
    DmmfDocument,
    DmmfEnum,
    DmmfEnumValue,
    DmmfField,
    DmmfModel,
    FieldKind,
)
from prismalint.models.positions import DOCUMENT_ROOT, ReportLocation, SourcePosition

__all__ = [
    "DOCUMENT_ROOT",
    "Datamodel",
    "Diagnostic",
    "DmmfDocument",
    "DmmfEnum",
    "DmmfEnumValue",
    "DmmfField",
    "DmmfModel",
    "FieldKind",
    "Fix",
    "ReportLocation",
    "Severity",
    "SourcePosition",
    "Suggestion",
]
