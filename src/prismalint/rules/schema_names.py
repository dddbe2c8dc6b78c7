"""Rules enforcing the naming style of names as declared in the schema.

These names surface in the generated client, so they follow TypeScript
conventions by default.
"""

from __future__ import annotations

from prismalint.models.dmmf import FieldKind
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
class SchemaModelNameStyle(NamingStyleRule):
    name = "schema-model-name-style"
    description = "Enforce schema model names to follow the configured TypeScript style"
    default_style = NamingStyle.PASCAL_CASE
    message_id = "invalidModelName"
    messages = {
        "invalidModelName": "Schema model names must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = ModelStyleOptions

    def check(self, context: RuleContext) -> None:
        for model in context.document.datamodel.models:
            if model.is_generated or model.name in self.options.ignore_models:
                continue
            self.check_entity(context, model.name, context.locator.model(model.name))


@RuleRegistry.register
class SchemaFieldNameStyle(NamingStyleRule):
    name = "schema-field-name-style"
    description = "Enforce schema field names to follow the configured TypeScript style"
    default_style = NamingStyle.CAMEL_CASE
    message_id = "invalidFieldName"
    messages = {
        "invalidFieldName": "Schema field names must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = FieldStyleOptions

    def check(self, context: RuleContext) -> None:
        for model in context.document.datamodel.models:
            if model.is_generated or model.name in self.options.ignore_models:
                continue
            for field in model.fields:
                if field.kind == FieldKind.UNSUPPORTED or field.name in self.options.allowlist:
                    continue
                self.check_entity(
                    context, field.name, context.locator.field(model.name, field.name)
                )


@RuleRegistry.register
class SchemaEnumNameStyle(NamingStyleRule):
    name = "schema-enum-name-style"
    description = "Enforce schema enum names to follow the configured TypeScript style"
    default_style = NamingStyle.PASCAL_CASE
    message_id = "invalidEnumName"
    messages = {
        "invalidEnumName": "Schema enum names must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = StyleOptions

    def check(self, context: RuleContext) -> None:
        for enum in context.document.datamodel.enums:
            self.check_entity(context, enum.name, context.locator.enum(enum.name))


@RuleRegistry.register
class SchemaEnumValueStyle(NamingStyleRule):
    name = "schema-enum-value-style"
    description = "Enforce schema enum values to follow the configured TypeScript style"
    default_style = NamingStyle.SCREAMING_SNAKE_CASE
    message_id = "invalidEnumValue"
    messages = {
        "invalidEnumValue": "Schema enum values must follow the {style} style.",
        RENAME_TO_STYLE: RENAME_MESSAGE,
    }
    options_model = StyleOptions

    def check(self, context: RuleContext) -> None:
        for enum in context.document.datamodel.enums:
            for value in enum.values:
                self.check_entity(
                    context, value.name, context.locator.enum_value(enum.name, value.name)
                )
