"""Shared machinery for rules that enforce a configurable naming style."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from prismalint.models.positions import SourcePosition
from prismalint.naming import NamingStyle, convert, matches_style, resolve_style
from prismalint.parser.locator import LocatedEntity
from prismalint.rules.base import Rule, RuleContext, RuleOptions

RENAME_TO_STYLE = "renameToStyle"
RENAME_MESSAGE = 'Rename to "{suggestion}"'


class StyleOptions(RuleOptions):
    style: str | None = None


class ModelStyleOptions(StyleOptions):
    ignore_models: list[str] = Field(default_factory=list, alias="ignoreModels")


class FieldStyleOptions(ModelStyleOptions):
    allowlist: list[str] = Field(default_factory=list)


def report_at(
    context: RuleContext,
    message_id: str,
    position: SourcePosition | None,
    data: dict[str, str] | None = None,
) -> None:
    """Report at a locator position, or at the document root when it is unknown."""
    if position is None:
        context.report(message_id, data)
        return
    context.report(
        message_id, data, location=context.translator.report_location(position)
    )


class NamingStyleRule(Rule):
    """Base for the ``schema-*`` and ``db-*`` naming-style rules.

    Subclasses set ``default_style`` and ``message_id``.  With
    ``checks_alias`` the effective name (the ``@map``/``@@map`` value when
    present) is validated and the alias position is preferred for reports.
    """

    default_style: ClassVar[NamingStyle]
    message_id: ClassVar[str]
    checks_alias: ClassVar[bool] = False
    options_model = StyleOptions
    has_suggestions = True

    style: NamingStyle

    def setup(self) -> None:
        self.style = resolve_style(self.options.style, self.default_style)

    def is_valid(self, name: str) -> bool:
        return matches_style(name, self.style)

    def check_entity(
        self,
        context: RuleContext,
        name: str,
        located: LocatedEntity | None,
        db_name: str | None = None,
    ) -> None:
        """Validate one entity and report it when it violates the style."""
        alias = self._alias(located, db_name)
        if not self.is_valid(alias or name):
            self.report_violation(context, name, located, alias)

    def _alias(self, located: LocatedEntity | None, db_name: str | None) -> str | None:
        if not self.checks_alias:
            return None
        if located is not None and located.alias:
            return located.alias
        return db_name or None

    def report_violation(
        self,
        context: RuleContext,
        name: str,
        located: LocatedEntity | None,
        alias: str | None = None,
    ) -> None:
        data = {"style": self.style.label}
        name_position = located.name_position if located else None
        alias_position = located.alias_position if located and self.checks_alias else None

        # The alias position wins whenever an alias value exists.
        if alias:
            position = alias_position or name_position
        else:
            position = name_position or alias_position
        if position is None:
            context.report(self.message_id, data)
            return

        fix_range: tuple[int, int] | None = None
        rewrites_alias = bool(alias) and alias_position is not None
        if rewrites_alias:
            fix_range = context.translator.alias_range(alias_position)
        elif not alias and name_position is not None:
            fix_range = context.translator.name_range(name_position, len(name))

        suggested = convert(alias or name, self.style)
        suggestions = []
        if fix_range is not None and suggested != (alias or name):
            suggestions.append(
                context.suggest(RENAME_TO_STYLE, fix_range, suggested, safe=rewrites_alias)
            )

        length = len(name) if position is name_position else 1
        context.report(
            self.message_id,
            data,
            location=context.translator.report_location(position, length),
            suggestions=suggestions,
        )
