"""YAML lint-configuration loader with line tracking for error reporting."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from prismalint.config.schema import LintConfig
from prismalint.exceptions import ConfigurationError

logger = logging.getLogger("prismalint.config")

_MAX_DEPTH = 20


class ConfigLoader:
    """Loads ``.prismalint.yaml`` files.

    Uses ruamel.yaml, which keeps line/column info on every parsed node, so
    configuration errors can point at the offending line.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.max_depth = _MAX_DEPTH

    def load(self, path: Path) -> LintConfig:
        """Load a configuration file."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> LintConfig:
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {filename}: {exc}") from exc
        if data is None:
            return LintConfig()
        if not isinstance(data, CommentedMap):
            raise ConfigurationError(f"{filename}: top level must be a mapping")
        lines: dict[str, int] = {}
        self._extract_lines(data, "", lines)
        return LintConfig.from_mapping(self._to_plain_value(data), lines)

    def _extract_lines(self, data: Any, prefix: str, lines: dict[str, int]) -> None:
        """Record the 1-based line of every mapping key, keyed by dotted path."""
        if not isinstance(data, CommentedMap):
            return
        for key in data:
            key_path = f"{prefix}.{key}" if prefix else str(key)
            try:
                line, _col = data.lc.key(key)
                lines[key_path] = line + 1
            except (AttributeError, KeyError, TypeError):
                pass
            self._extract_lines(data[key], key_path, lines)

    def _to_plain_value(self, data: Any) -> Any:
        if isinstance(data, CommentedMap):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, CommentedSeq):
            return [self._to_plain_value(item) for item in data]
        return data


def load_config(path: Path | None = None, default_name: str = ".prismalint.yaml") -> LintConfig:
    """Load *path*, or *default_name* from the working directory if it exists.

    Without either, the recommended preset is returned.
    """
    loader = ConfigLoader()
    if path is not None:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        return loader.load(path)
    default_path = Path(default_name)
    if default_path.is_file():
        logger.debug("Using configuration %s", default_path)
        return loader.load(default_path)
    return LintConfig()
