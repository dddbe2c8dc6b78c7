"""Lint runner: core service layer reused by the CLI and the REST API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from prismalint.config.schema import LintConfig
from prismalint.models.diagnostics import Diagnostic, Severity
from prismalint.parser.context import SchemaContextBuilder
from prismalint.parser.dmmf import NodeDmmfParser, SchemaParser
from prismalint.parser.translator import PositionTranslator
from prismalint.rules import Rule, RuleContext, RuleRegistry
from prismalint.settings import Settings

logger = logging.getLogger("prismalint.service")

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class LintResult:
    """Diagnostics for one document.

    ``analysed`` is False when no rule applied to the filename or the
    schema did not parse; such documents have no diagnostics.
    """

    filename: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    analysed: bool = True

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARN)


@dataclass
class FixResult:
    """Output of applying suggested renames to a document."""

    filename: str
    output: str
    applied: int
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.applied > 0


def apply_fixes(
    text: str,
    diagnostics: Iterable[Diagnostic],
    *,
    include_renames: bool = False,
) -> tuple[str, int]:
    """Apply the first suggestion of each diagnostic to *text*.

    Only safe fixes (alias rewrites) are applied unless *include_renames* is
    set; renaming a declared name does not update its references.  Fixes
    are applied in document order; a fix overlapping one already applied is
    skipped.  Returns the new text and the number applied.
    """
    fixes = sorted(
        (
            d.suggestions[0].fix
            for d in diagnostics
            if d.suggestions and (include_renames or d.suggestions[0].fix.safe)
        ),
        key=lambda fix: fix.range,
    )
    pieces: list[str] = []
    cursor = 0
    applied = 0
    for fix in fixes:
        start, end = fix.range
        if start < cursor:
            continue
        pieces.append(text[cursor:start])
        pieces.append(fix.text)
        cursor = end
        applied += 1
    pieces.append(text[cursor:])
    return "".join(pieces), applied


# ---------------------------------------------------------------------------
# SchemaLinter
# ---------------------------------------------------------------------------


class SchemaLinter:
    """Runs the configured rules against schema documents.

    Rules are instantiated up front so configuration errors surface before
    any document is read.  The schema context of a document is built once
    and shared by every rule.
    """

    def __init__(self, config: LintConfig | None = None, parser: SchemaParser | None = None) -> None:
        config = config or LintConfig()
        self._rules: list[tuple[Rule, Severity]] = []
        for name, setting in config.effective_rules().items():
            rule = RuleRegistry.create(name, setting.options)
            self._rules.append((rule, setting.severity))
        self._builder = SchemaContextBuilder(parser or NodeDmmfParser())

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        config: LintConfig | None = None,
        parser: SchemaParser | None = None,
    ) -> SchemaLinter:
        """Build a linter whose default parser is configured from *settings*."""
        if parser is None:
            parser = NodeDmmfParser(
                node_binary=settings.node_binary,
                cwd=settings.prisma_internals_dir,
                timeout=settings.parse_timeout_seconds,
            )
        return cls(config, parser)

    @property
    def rules(self) -> list[Rule]:
        return [rule for rule, _severity in self._rules]

    def lint_text(self, text: str, filename: str = "schema.prisma") -> LintResult:
        """Lint a host document (raw schema or carrier)."""
        applicable = [(rule, sev) for rule, sev in self._rules if rule.applies_to(filename)]
        if not applicable:
            return LintResult(filename=filename, analysed=False)

        schema = self._builder.build(text)
        if schema is None:
            logger.info("Skipping %s: schema does not parse", filename)
            return LintResult(filename=filename, analysed=False)

        translator = PositionTranslator(schema)
        diagnostics: list[Diagnostic] = []
        for rule, severity in applicable:
            context = RuleContext(
                rule, schema, filename=filename, severity=severity, translator=translator
            )
            rule.check(context)
            diagnostics.extend(context.diagnostics)

        diagnostics.sort(key=lambda d: (d.line, d.column, d.rule))
        logger.debug("%s: %d diagnostic(s)", filename, len(diagnostics))
        return LintResult(filename=filename, diagnostics=diagnostics)

    def lint_file(self, path: Path) -> LintResult:
        with path.open("r", encoding="utf-8", newline="") as handle:
            text = handle.read()
        return self.lint_text(text, filename=str(path))

    def fix_text(self, text: str, filename: str = "schema.prisma") -> FixResult:
        """Lint *text* and rewrite non-conforming ``@map``/``@@map`` values.

        Renames of declared names stay in the diagnostics as suggestions.
        """
        result = self.lint_text(text, filename)
        output, applied = apply_fixes(text, result.diagnostics)
        return FixResult(
            filename=filename, output=output, applied=applied, diagnostics=result.diagnostics
        )
