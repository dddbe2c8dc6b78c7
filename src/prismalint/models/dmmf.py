"""Subset of the Prisma DMMF document consumed by the lint rules.

The document is produced by an external parser (see
:mod:`prismalint.parser.dmmf`); only names, kinds and per-entity
collections are modelled, other keys are ignored.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class FieldKind(StrEnum):
    SCALAR = "scalar"
    OBJECT = "object"
    ENUM = "enum"
    UNSUPPORTED = "unsupported"


class DmmfField(BaseModel):
    """A model field."""

    name: str
    kind: FieldKind = FieldKind.SCALAR
    type: str = ""
    db_name: str | None = Field(None, alias="dbName")

    model_config = {"populate_by_name": True}

    @property
    def is_column(self) -> bool:
        """True for fields backed by a database column (scalars and enums)."""
        return self.kind in (FieldKind.SCALAR, FieldKind.ENUM)


class DmmfModel(BaseModel):
    """A ``model`` block."""

    name: str
    db_name: str | None = Field(None, alias="dbName")
    is_generated: bool = Field(False, alias="isGenerated")
    fields: list[DmmfField] = []

    model_config = {"populate_by_name": True}


class DmmfEnumValue(BaseModel):
    name: str
    db_name: str | None = Field(None, alias="dbName")

    model_config = {"populate_by_name": True}


class DmmfEnum(BaseModel):
    """An ``enum`` block."""

    name: str
    db_name: str | None = Field(None, alias="dbName")
    values: list[DmmfEnumValue] = []

    model_config = {"populate_by_name": True}


class Datamodel(BaseModel):
    models: list[DmmfModel] = []
    enums: list[DmmfEnum] = []


class DmmfDocument(BaseModel):
    """Root of the parser response."""

    datamodel: Datamodel = Datamodel()
