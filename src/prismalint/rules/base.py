"""Rule base class and the reporting context handed to rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from prismalint.exceptions import ConfigurationError
from prismalint.models.diagnostics import Diagnostic, Fix, Severity, Suggestion
from prismalint.models.dmmf import DmmfDocument
from prismalint.models.positions import DOCUMENT_ROOT, ReportLocation
from prismalint.parser.carrier import is_schema_filename
from prismalint.parser.context import SchemaContext
from prismalint.parser.locator import SchemaLocator
from prismalint.parser.translator import PositionTranslator


class RuleOptions(BaseModel):
    """Base for per-rule option models; unknown keys are a configuration error."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


class Rule(ABC):
    """A lint rule checking one aspect of a schema.

    Subclasses declare ``name``, ``description``, ``messages`` (message id to
    ``str.format`` template) and optionally an ``options_model``.  Options are
    validated when the rule is constructed so bad configuration fails before
    any document is linted.
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""
    messages: ClassVar[dict[str, str]] = {}
    options_model: ClassVar[type[RuleOptions]] = RuleOptions
    has_suggestions: ClassVar[bool] = False

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        try:
            self.options = self.options_model.model_validate(dict(options or {}))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid options for rule '{self.name}': {exc}") from exc
        self.setup()

    def setup(self) -> None:
        """Resolve options that need more than validation (e.g. naming styles)."""

    def applies_to(self, filename: str) -> bool:
        return is_schema_filename(filename)

    def format_message(self, message_id: str, data: Mapping[str, str] | None = None) -> str:
        return self.messages[message_id].format(**(data or {}))

    @abstractmethod
    def check(self, context: RuleContext) -> None: ...


class RuleContext:
    """Per-(rule, document) reporting surface.

    Wraps the shared :class:`SchemaContext` and collects the diagnostics the
    rule reports, already in host-document coordinates.
    """

    def __init__(
        self,
        rule: Rule,
        schema: SchemaContext,
        *,
        filename: str = "schema.prisma",
        severity: Severity = Severity.ERROR,
        translator: PositionTranslator | None = None,
    ) -> None:
        self.rule = rule
        self.schema = schema
        self.filename = filename
        self.severity = severity
        self.translator = translator or PositionTranslator(schema)
        self.diagnostics: list[Diagnostic] = []

    @property
    def locator(self) -> SchemaLocator:
        return self.schema.locator

    @property
    def document(self) -> DmmfDocument:
        return self.schema.document

    def suggest(
        self, message_id: str, fix_range: tuple[int, int], text: str, *, safe: bool = False
    ) -> Suggestion:
        return Suggestion(
            message_id=message_id,
            desc=self.rule.format_message(message_id, {"suggestion": text}),
            fix=Fix(range=fix_range, text=text, safe=safe),
        )

    def report(
        self,
        message_id: str,
        data: Mapping[str, str] | None = None,
        *,
        location: ReportLocation | None = None,
        suggestions: Iterable[Suggestion] = (),
    ) -> Diagnostic:
        """Record a diagnostic; without *location* it is anchored at the document root."""
        diagnostic = Diagnostic(
            rule=self.rule.name,
            message_id=message_id,
            message=self.rule.format_message(message_id, data),
            severity=self.severity,
            location=location or DOCUMENT_ROOT,
            data=dict(data or {}),
            suggestions=list(suggestions),
        )
        self.diagnostics.append(diagnostic)
        return diagnostic
