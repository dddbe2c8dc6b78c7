"""Dependency injection for FastAPI: SchemaLinter singleton."""

from __future__ import annotations

from prismalint.service.linter import SchemaLinter

_linter: SchemaLinter | None = None


def init_linter(linter: SchemaLinter) -> None:
    """Set the global SchemaLinter (called at app startup)."""
    global _linter  # noqa: PLW0603
    _linter = linter


def get_linter() -> SchemaLinter:
    """FastAPI ``Depends`` provider for SchemaLinter."""
    if _linter is None:
        raise RuntimeError("SchemaLinter not initialised; call init_linter() first")
    return _linter


def is_linter_initialised() -> bool:
    return _linter is not None


def reset_linter() -> None:
    """Clear the global SchemaLinter (for tests)."""
    global _linter  # noqa: PLW0603
    _linter = None
