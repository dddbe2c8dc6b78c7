"""Exception hierarchy for prismalint.

Configuration problems fail fast at setup time.  Everything that can go
wrong while analysing a document (schema mid-edit, locator misses) is
recoverable and never surfaces as an exception to callers of the linter.
"""

from __future__ import annotations


class PrismaLintError(Exception):
    """Base class for all prismalint errors."""


class ConfigurationError(PrismaLintError):
    """Raised when lint configuration cannot be honoured."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class InvalidNamingStyleError(ConfigurationError):
    """Raised when a naming-style alias does not resolve to a known style."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f'Invalid style "{value}". Expected snake_case, camel_case, '
            "pascal_case, or screaming_snake_case."
        )


class UnknownRuleError(ConfigurationError):
    """Raised when a configured rule name is not registered."""

    def __init__(self, name: str, available: list[str], *, line: int | None = None) -> None:
        self.rule_name = name
        self.available = available
        super().__init__(
            f"Unknown rule '{name}'. Available: {', '.join(available)}", line=line
        )


class SchemaParseError(PrismaLintError):
    """Raised by a schema parser when it rejects the schema text."""
