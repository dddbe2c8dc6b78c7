"""Lint service layer shared by the CLI and REST API."""

from prismalint.service.linter import FixResult, LintResult, SchemaLinter, apply_fixes

__all__ = ["FixResult", "LintResult", "SchemaLinter", "apply_fixes"]
