"""Rule registry: discover and instantiate lint rules by name."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prismalint.exceptions import UnknownRuleError
from prismalint.rules.base import Rule


class RuleRegistry:
    """Registry for lint rule classes."""

    _rules: dict[str, type[Rule]] = {}

    @classmethod
    def register(cls, rule_class: type[Rule]) -> type[Rule]:
        """Register a rule class. Can be used as a decorator."""
        cls._rules[rule_class.name] = rule_class
        return rule_class

    @classmethod
    def get_class(cls, name: str) -> type[Rule]:
        if name not in cls._rules:
            raise UnknownRuleError(name, available=cls.available())
        return cls._rules[name]

    @classmethod
    def create(cls, name: str, options: Mapping[str, Any] | None = None) -> Rule:
        """Instantiate the named rule with *options*."""
        return cls.get_class(name)(options)

    @classmethod
    def available(cls) -> list[str]:
        """List registered rule names."""
        return sorted(cls._rules.keys())
