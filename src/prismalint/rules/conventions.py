"""Fixed repository conventions: camelCase in Prisma, snake_case in the database.

Unlike the configurable style rules these only report; they offer no fixes.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from prismalint.naming import is_camel_case, is_pascal_case, is_screaming_snake_case, is_snake_case
from prismalint.rules.base import Rule, RuleContext, RuleOptions
from prismalint.rules.registry import RuleRegistry
from prismalint.rules.style import report_at


class TableNamesOptions(RuleOptions):
    ignore_models: list[str] = Field(default_factory=list, alias="ignoreModels")


class ColumnNamesOptions(RuleOptions):
    allowlist: list[str] = Field(default_factory=list)


class EnumNamesOptions(RuleOptions):
    enum_name_style: Literal["snake_case", "pascal_case"] = Field(
        "snake_case", alias="enumNameStyle"
    )
    require_enum_map: bool = Field(True, alias="requireEnumMap")


@RuleRegistry.register
class PrismaTableNames(Rule):
    name = "prisma-table-names"
    description = "Require models to map to snake_case table names via @@map"
    messages = {
        "invalidTableName": 'Prisma models must map to snake_case DB tables via `@@map("...")`.',
    }
    options_model = TableNamesOptions

    def check(self, context: RuleContext) -> None:
        for model in context.document.datamodel.models:
            if model.is_generated or model.name in self.options.ignore_models:
                continue
            located = context.locator.model(model.name)
            alias = located.alias if located else None
            if alias and is_snake_case(alias):
                continue
            position = None
            if located is not None:
                position = located.alias_position or located.name_position
            report_at(context, "invalidTableName", position)


@RuleRegistry.register
class PrismaColumnNames(Rule):
    name = "prisma-column-names"
    description = "Enforce camelCase Prisma fields mapped to snake_case columns"
    messages = {
        "invalidFieldName": (
            "Prisma model field names must be camelCase. "
            'Use `@map("...")` to map to a snake_case DB column.'
        ),
    }
    options_model = ColumnNamesOptions

    def check(self, context: RuleContext) -> None:
        for model in context.document.datamodel.models:
            if model.is_generated:
                continue
            for field in model.fields:
                if not field.is_column or field.name in self.options.allowlist:
                    continue
                located = context.locator.field(model.name, field.name)
                if not self._is_valid(field.name, located.alias if located else None):
                    position = located.name_position if located else None
                    report_at(context, "invalidFieldName", position)

    @staticmethod
    def _is_valid(name: str, alias: str | None) -> bool:
        # Without a map the field name doubles as the column name.
        if not is_camel_case(name):
            return False
        return is_snake_case(alias if alias else name)


@RuleRegistry.register
class PrismaEnumNames(Rule):
    name = "prisma-enum-names"
    description = "Enforce Prisma enum naming and mapping conventions"
    messages = {
        "invalidEnumName": (
            "Prisma enum names must follow the configured repo convention "
            'and include `@@map("...")` when required.'
        ),
        "invalidEnumValue": "Prisma enum values must be SCREAMING_SNAKE_CASE.",
    }
    options_model = EnumNamesOptions

    def check(self, context: RuleContext) -> None:
        for enum in context.document.datamodel.enums:
            located = context.locator.enum(enum.name)
            if self.options.enum_name_style == "snake_case":
                name_valid = is_snake_case(enum.name)
            else:
                name_valid = is_pascal_case(enum.name)
            alias = located.alias if located else None
            map_valid = bool(alias) and is_snake_case(alias)

            if not name_valid or (self.options.require_enum_map and not map_valid):
                position = None
                if located is not None:
                    position = located.name_position or located.alias_position
                report_at(context, "invalidEnumName", position)

            for value in enum.values:
                if is_screaming_snake_case(value.name):
                    continue
                located_value = context.locator.enum_value(enum.name, value.name)
                report_at(
                    context,
                    "invalidEnumValue",
                    located_value.name_position if located_value else None,
                )
