"""Lint rule catalog."""

# Import rule modules to trigger registration
import prismalint.rules.conventions as _conventions  # noqa: F401
import prismalint.rules.db_names as _db_names  # noqa: F401
import prismalint.rules.schema_names as _schema_names  # noqa: F401
from prismalint.rules.base import Rule, RuleContext, RuleOptions
from prismalint.rules.registry import RuleRegistry

__all__ = [
    "Rule",
    "RuleContext",
    "RuleOptions",
    "RuleRegistry",
]
