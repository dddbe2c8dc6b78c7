"""Lint configuration loading."""

from prismalint.config.loader import ConfigLoader, load_config
from prismalint.config.schema import RECOMMENDED_RULES, LintConfig, RuleSetting

__all__ = [
    "RECOMMENDED_RULES",
    "ConfigLoader",
    "LintConfig",
    "RuleSetting",
    "load_config",
]
