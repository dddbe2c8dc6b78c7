"""Rules enforcing the naming style of database names.

The database name of an entity is its ``@map``/``@@map`` value when present,
otherwise its declared name.  Reports point at the attribute when an alias
exists and the suggested fix rewrites the quoted value.
"""

from __future__ import annotations

from prismalint.naming import NamingStyle
from prismalint.rules.base import RuleContext
from prismalint.rules.registry import RuleRegistry
from prismalint.rules.style import (
    RENAME_MESSAGE,
    RENAME_TO_STYLE,
    FieldStyleOptions,
    ModelStyleOptions,
    NamingStyleRule,
    StyleOptions,
)


@RuleRegistry.register
class DbTableNameStyle(NamingStyleRule):
    name = "db-table-name-style"
    description = "Enforce database table names to follow the configured style"
    default_style = NamingStyle.SNAKE_CASE
    message_id = "invalidTableName"
    checks_alias = True
    messages = {
        "invalidTableName": "Database table names must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = ModelStyleOptions

    def check(self, context: RuleContext) -> None:
        for model in context.document.datamodel.models:
            if model.is_generated or model.name in self.options.ignore_models:
                continue
            self.check_entity(
                context, model.name, context.locator.model(model.name), model.db_name
            )


@RuleRegistry.register
class DbColumnNameStyle(NamingStyleRule):
    name = "db-column-name-style"
    description = "Enforce database column names to follow the configured style"
    default_style = NamingStyle.SNAKE_CASE
    message_id = "invalidColumnName"
    checks_alias = True
    messages = {
        "invalidColumnName": "Database column names must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = FieldStyleOptions

    def check(self, context: RuleContext) -> None:
        for model in context.document.datamodel.models:
            if model.is_generated or model.name in self.options.ignore_models:
                continue
            for field in model.fields:
                if not field.is_column or field.name in self.options.allowlist:
                    continue
                self.check_entity(
                    context,
                    field.name,
                    context.locator.field(model.name, field.name),
                    field.db_name,
                )


@RuleRegistry.register
class DbEnumNameStyle(NamingStyleRule):
    name = "db-enum-name-style"
    description = "Enforce database enum names to follow the configured style"
    default_style = NamingStyle.SNAKE_CASE
    message_id = "invalidEnumName"
    checks_alias = True
    messages = {
        "invalidEnumName": "Database enum names must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = StyleOptions

    def check(self, context: RuleContext) -> None:
        for enum in context.document.datamodel.enums:
            self.check_entity(context, enum.name, context.locator.enum(enum.name), enum.db_name)


@RuleRegistry.register
class DbEnumValueStyle(NamingStyleRule):
    name = "db-enum-value-style"
    description = "Enforce database enum values to follow the configured style"
    default_style = NamingStyle.SNAKE_CASE
    message_id = "invalidEnumValue"
    checks_alias = True
    messages = {
        "invalidEnumValue": "Database enum values must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = StyleOptions

    def check(self, context: RuleContext) -> None:
        for enum in context.document.datamodel.enums:
            for value in enum.values:
                self.check_entity(
                    context,
                    value.name,
                    context.locator.enum_value(enum.name, value.name),
                    value.db_name,
                )
