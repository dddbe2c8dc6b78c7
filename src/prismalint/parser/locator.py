"""Line-oriented scanner that locates named schema entities.

The external parser knows the structure of a schema but not where each name
was written.  ``build_locator`` re-derives those positions with a single
forward pass over the raw schema text.  Only the subset of the grammar
needed for positions is recognised: top-level ``model``/``enum`` blocks,
their member lines and single-line ``@map``/``@@map`` attributes.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import StrEnum

from prismalint.models.positions import SourcePosition

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_MODEL_HEADER_RE = re.compile(r"^\s*model\s+(\w+)\s*\{")
_ENUM_HEADER_RE = re.compile(r"^\s*enum\s+(\w+)\s*\{")
_FIELD_RE = re.compile(r"^\s*(\w+)\s+\S+")
_ENUM_VALUE_RE = re.compile(r"^\s*(\w+)")
_BLOCK_MAP_RE = re.compile(r'@@map\(\s*(?:name\s*:\s*)?"([^"]*)"\s*\)')
_MEMBER_MAP_RE = re.compile(r'(?<!@)@map\(\s*(?:name\s*:\s*)?"([^"]*)"\s*\)')


class EntityKind(StrEnum):
    MODEL = "model"
    FIELD = "field"
    ENUM = "enum"
    ENUM_VALUE = "enum_value"


@dataclass(frozen=True)
class LocatedEntity:
    """Where one schema entity and its optional alias were written."""

    kind: EntityKind
    name: str
    owner: str | None = None
    name_position: SourcePosition | None = None
    alias: str | None = None
    alias_position: SourcePosition | None = None

    @property
    def effective_name(self) -> str:
        """The alias when present, else the declared name."""
        return self.alias or self.name


EntityKey = tuple[EntityKind, str | None, str]


class SchemaLocator:
    """Index of located entities keyed by ``(kind, owner, name)``.

    Fields are owned by their model, enum values by their enum; models and
    enums have no owner.  Built once per analysis and read-only afterwards.
    """

    def __init__(self) -> None:
        self._entities: dict[EntityKey, LocatedEntity] = {}

    # -- building ------------------------------------------------------------

    def _put(self, entity: LocatedEntity) -> None:
        self._entities[(entity.kind, entity.owner, entity.name)] = entity

    def _update(self, kind: EntityKind, owner: str | None, name: str, **changes: object) -> None:
        key = (kind, owner, name)
        current = self._entities.get(key) or LocatedEntity(kind=kind, name=name, owner=owner)
        self._entities[key] = replace(current, **changes)

    # -- queries -------------------------------------------------------------

    def get(self, kind: EntityKind, name: str, owner: str | None = None) -> LocatedEntity | None:
        return self._entities.get((kind, owner, name))

    def model(self, name: str) -> LocatedEntity | None:
        return self.get(EntityKind.MODEL, name)

    def field(self, model: str, name: str) -> LocatedEntity | None:
        return self.get(EntityKind.FIELD, name, owner=model)

    def enum(self, name: str) -> LocatedEntity | None:
        return self.get(EntityKind.ENUM, name)

    def enum_value(self, enum: str, name: str) -> LocatedEntity | None:
        return self.get(EntityKind.ENUM_VALUE, name, owner=enum)

    def entities(self, kind: EntityKind | None = None) -> Iterator[LocatedEntity]:
        for entity in self._entities.values():
            if kind is None or entity.kind == kind:
                yield entity

    def __len__(self) -> int:
        return len(self._entities)

    # -- map views -----------------------------------------------------------

    def _positions(self, kind: EntityKind, owner: str | None) -> dict[str, SourcePosition]:
        return {
            e.name: e.name_position
            for e in self.entities(kind)
            if e.owner == owner and e.name_position is not None
        }

    def _alias_positions(self, kind: EntityKind, owner: str | None) -> dict[str, SourcePosition]:
        return {
            e.name: e.alias_position
            for e in self.entities(kind)
            if e.owner == owner and e.alias_position is not None
        }

    def _alias_values(self, kind: EntityKind, owner: str | None) -> dict[str, str]:
        return {
            e.name: e.alias
            for e in self.entities(kind)
            if e.owner == owner and e.alias is not None
        }

    @property
    def model_locations(self) -> dict[str, SourcePosition]:
        return self._positions(EntityKind.MODEL, None)

    @property
    def model_map_locations(self) -> dict[str, SourcePosition]:
        return self._alias_positions(EntityKind.MODEL, None)

    @property
    def model_map_values(self) -> dict[str, str]:
        return self._alias_values(EntityKind.MODEL, None)

    @property
    def enum_locations(self) -> dict[str, SourcePosition]:
        return self._positions(EntityKind.ENUM, None)

    @property
    def enum_map_locations(self) -> dict[str, SourcePosition]:
        return self._alias_positions(EntityKind.ENUM, None)

    @property
    def enum_map_values(self) -> dict[str, str]:
        return self._alias_values(EntityKind.ENUM, None)

    def field_locations(self, model: str) -> dict[str, SourcePosition]:
        return self._positions(EntityKind.FIELD, model)

    def field_map_locations(self, model: str) -> dict[str, SourcePosition]:
        return self._alias_positions(EntityKind.FIELD, model)

    def field_map_values(self, model: str) -> dict[str, str]:
        return self._alias_values(EntityKind.FIELD, model)

    def enum_value_locations(self, enum: str) -> dict[str, SourcePosition]:
        return self._positions(EntityKind.ENUM_VALUE, enum)

    def enum_value_map_locations(self, enum: str) -> dict[str, SourcePosition]:
        return self._alias_positions(EntityKind.ENUM_VALUE, enum)

    def enum_value_map_values(self, enum: str) -> dict[str, str]:
        return self._alias_values(EntityKind.ENUM_VALUE, enum)


def _record_block_map(
    locator: SchemaLocator,
    kind: EntityKind,
    name: str,
    line: str,
    line_number: int,
) -> None:
    """Record an ``@@map`` line for the model or enum *name*."""
    changes: dict[str, object] = {
        "alias_position": SourcePosition(line=line_number, column=max(0, line.find("@@map"))),
    }
    match = _BLOCK_MAP_RE.search(line)
    if match and match.group(1):
        changes["alias"] = match.group(1)
    locator._update(kind, None, name, **changes)


def _record_member(
    locator: SchemaLocator,
    kind: EntityKind,
    owner: str,
    match: re.Match[str],
    line: str,
    line_number: int,
) -> None:
    """Record a field or enum value line, with its same-line ``@map`` if any."""
    name = match.group(1)
    entity = LocatedEntity(
        kind=kind,
        name=name,
        owner=owner,
        name_position=SourcePosition(line=line_number, column=match.start(1)),
    )
    map_match = _MEMBER_MAP_RE.search(line)
    if map_match and map_match.group(1):
        entity = replace(
            entity,
            alias=map_match.group(1),
            alias_position=SourcePosition(line=line_number, column=map_match.start()),
        )
    locator._put(entity)


def build_locator(schema_text: str) -> SchemaLocator:
    """Scan *schema_text* and locate every model, field, enum and enum value.

    Block state is ``Outside``, ``InModel(name)`` or ``InEnum(name)``; only
    block headers and closing braces change it, so a member named ``model``
    or ``enum`` stays attributed to its enclosing block.  Unterminated blocks
    are not an error; the external parser is the authority on structure.
    """
    locator = SchemaLocator()
    current_model: str | None = None
    current_enum: str | None = None

    for index, line in enumerate(_LINE_SPLIT_RE.split(schema_text)):
        line_number = index + 1
        trimmed = line.strip()
        if trimmed.startswith("//"):
            continue

        model_match = _MODEL_HEADER_RE.match(line)
        if model_match:
            current_model, current_enum = model_match.group(1), None
            locator._update(
                EntityKind.MODEL,
                None,
                current_model,
                name_position=SourcePosition(line=line_number, column=model_match.start(1)),
            )
            continue

        enum_match = _ENUM_HEADER_RE.match(line)
        if enum_match:
            current_enum, current_model = enum_match.group(1), None
            locator._update(
                EntityKind.ENUM,
                None,
                current_enum,
                name_position=SourcePosition(line=line_number, column=enum_match.start(1)),
            )
            continue

        if trimmed.startswith("}"):
            current_model = current_enum = None
            continue

        if current_model is not None:
            if trimmed.startswith("@@map"):
                _record_block_map(locator, EntityKind.MODEL, current_model, line, line_number)
                continue
            if trimmed.startswith("@"):
                continue
            field_match = _FIELD_RE.match(line)
            if field_match:
                _record_member(
                    locator, EntityKind.FIELD, current_model, field_match, line, line_number
                )
            continue

        if current_enum is not None:
            if trimmed.startswith("@@map"):
                _record_block_map(locator, EntityKind.ENUM, current_enum, line, line_number)
                continue
            if not trimmed or trimmed.startswith("@"):
                continue
            value_match = _ENUM_VALUE_RE.match(line)
            if value_match:
                _record_member(
                    locator, EntityKind.ENUM_VALUE, current_enum, value_match, line, line_number
                )

    return locator
