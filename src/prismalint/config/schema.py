"""Lint configuration model: which rules run, at what severity, with which options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel

from prismalint.exceptions import ConfigurationError
from prismalint.models.diagnostics import Severity

RECOMMENDED_RULES: tuple[str, ...] = (
    "schema-model-name-style",
    "schema-field-name-style",
    "schema-enum-name-style",
    "schema-enum-value-style",
    "db-table-name-style",
    "db-column-name-style",
    "db-enum-name-style",
    "db-enum-value-style",
)

_SEVERITY_ALIASES: dict[object, Severity] = {
    "off": Severity.OFF,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "error": Severity.ERROR,
    0: Severity.OFF,
    1: Severity.WARN,
    2: Severity.ERROR,
}


class RuleSetting(BaseModel):
    """Severity and options for one configured rule."""

    severity: Severity = Severity.ERROR
    options: dict[str, Any] = {}

    @property
    def enabled(self) -> bool:
        return self.severity != Severity.OFF


def parse_severity(value: object, *, line: int | None = None) -> Severity:
    key = value.lower() if isinstance(value, str) else value
    if isinstance(key, bool) or not isinstance(key, str | int) or key not in _SEVERITY_ALIASES:
        raise ConfigurationError(
            f"Invalid severity {value!r}. Expected off, warn or error (or 0, 1, 2)", line=line
        )
    return _SEVERITY_ALIASES[key]


def parse_rule_setting(name: str, value: object, *, line: int | None = None) -> RuleSetting:
    """Accept ``error``, ``2`` or ``[error, {options}]``."""
    if isinstance(value, list | tuple):
        if not 1 <= len(value) <= 2:
            raise ConfigurationError(
                f"Rule '{name}' must be a severity or [severity, options]", line=line
            )
        severity = parse_severity(value[0], line=line)
        options = value[1] if len(value) == 2 else {}
        if not isinstance(options, Mapping):
            raise ConfigurationError(f"Options for rule '{name}' must be a mapping", line=line)
        return RuleSetting(severity=severity, options=dict(options))
    return RuleSetting(severity=parse_severity(value, line=line))


class LintConfig(BaseModel):
    """Top-level lint configuration.

    ``extends: recommended`` (the default) enables the naming-style rules at
    ``error``; entries under ``rules`` override the preset.
    """

    extends: Literal["recommended", "none"] = "recommended"
    rules: dict[str, RuleSetting] = {}

    def effective_rules(self) -> dict[str, RuleSetting]:
        merged: dict[str, RuleSetting] = {}
        if self.extends == "recommended":
            merged = {name: RuleSetting() for name in RECOMMENDED_RULES}
        merged.update(self.rules)
        return {name: setting for name, setting in merged.items() if setting.enabled}

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        lines: Mapping[str, int] | None = None,
    ) -> LintConfig:
        """Build a config from decoded YAML; *lines* maps key paths to source lines."""
        lines = lines or {}
        unknown = sorted(set(data) - {"extends", "rules"})
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration key '{unknown[0]}'", line=lines.get(unknown[0])
            )
        extends = data.get("extends", "recommended")
        if extends not in ("recommended", "none"):
            raise ConfigurationError(
                f"Invalid extends {extends!r}. Expected recommended or none",
                line=lines.get("extends"),
            )
        raw_rules = data.get("rules") or {}
        if not isinstance(raw_rules, Mapping):
            raise ConfigurationError("'rules' must be a mapping", line=lines.get("rules"))
        rules = {
            str(name): parse_rule_setting(str(name), value, line=lines.get(f"rules.{name}"))
            for name, value in raw_rules.items()
        }
        return cls(extends=extends, rules=rules)
