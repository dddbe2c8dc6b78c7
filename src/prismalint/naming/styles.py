"""Naming-style classification and conversion.

Each style is described once in ``_STYLE_RULES``: a validation pattern and a
function that joins segmented words back into an identifier.  Predicates,
dispatch and conversion all go through that table.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from prismalint.exceptions import InvalidNamingStyleError


class NamingStyle(StrEnum):
    SNAKE_CASE = "snake_case"
    CAMEL_CASE = "camel_case"
    PASCAL_CASE = "pascal_case"
    SCREAMING_SNAKE_CASE = "screaming_snake_case"

    @property
    def label(self) -> str:
        """Human-readable label used in diagnostic messages."""
        return _STYLE_RULES[self].label


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _join_snake(words: list[str]) -> str:
    return "_".join(word.lower() for word in words)


def _join_screaming(words: list[str]) -> str:
    return "_".join(word.upper() for word in words)


def _join_camel(words: list[str]) -> str:
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def _join_pascal(words: list[str]) -> str:
    return "".join(_capitalize(word) for word in words)


@dataclass(frozen=True)
class StyleRule:
    """Validation pattern and word joiner for one naming style."""

    label: str
    pattern: re.Pattern[str]
    join: Callable[[list[str]], str]

    def matches(self, identifier: str) -> bool:
        return self.pattern.fullmatch(identifier) is not None


_STYLE_RULES: dict[NamingStyle, StyleRule] = {
    NamingStyle.SNAKE_CASE: StyleRule(
        label="snake_case",
        pattern=re.compile(r"[a-z][a-z0-9]*(?:_[a-z0-9]+)*"),
        join=_join_snake,
    ),
    NamingStyle.CAMEL_CASE: StyleRule(
        label="camelCase",
        pattern=re.compile(r"[a-z][a-zA-Z0-9]*"),
        join=_join_camel,
    ),
    NamingStyle.PASCAL_CASE: StyleRule(
        label="PascalCase",
        pattern=re.compile(r"[A-Z][a-zA-Z0-9]*"),
        join=_join_pascal,
    ),
    NamingStyle.SCREAMING_SNAKE_CASE: StyleRule(
        label="SCREAMING_SNAKE_CASE",
        pattern=re.compile(r"[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*"),
        join=_join_screaming,
    ),
}

_SEPARATORS_RE = re.compile(r"[_\s]+")
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z0-9]+)")
_ALIAS_NOISE_RE = re.compile(r"[_\-\s]+")

# Normalized alias key -> style.  Keys have separators removed and are lowercase.
_STYLE_ALIASES: dict[str, NamingStyle] = {
    _ALIAS_NOISE_RE.sub("", style.value).lower(): style for style in NamingStyle
}


def is_snake_case(value: str) -> bool:
    return _STYLE_RULES[NamingStyle.SNAKE_CASE].matches(value)


def is_camel_case(value: str) -> bool:
    return _STYLE_RULES[NamingStyle.CAMEL_CASE].matches(value)


def is_pascal_case(value: str) -> bool:
    return _STYLE_RULES[NamingStyle.PASCAL_CASE].matches(value)


def is_screaming_snake_case(value: str) -> bool:
    return _STYLE_RULES[NamingStyle.SCREAMING_SNAKE_CASE].matches(value)


def matches_style(value: str, style: NamingStyle) -> bool:
    """Return True when *value* satisfies *style*.

    A value may satisfy several styles at once: ``id`` is both snake_case
    and camelCase.
    """
    return _STYLE_RULES[style].matches(value)


def split_words(value: str) -> list[str]:
    """Segment an identifier into words.

    Underscores and whitespace separate words, as do lower→upper boundaries
    and acronym→titlecase boundaries (``HTTPServer`` → ``HTTP``, ``Server``).
    Digits stay attached to the preceding letter run.
    """
    normalized = _SEPARATORS_RE.sub(" ", value)
    normalized = _LOWER_UPPER_RE.sub(r"\1 \2", normalized)
    normalized = _ACRONYM_RE.sub(r"\1 \2", normalized)
    return normalized.split()


def convert(value: str, style: NamingStyle) -> str:
    """Segment *value* and re-join the words in *style*.

    Conforming input is normalized too: ``HTTPServer`` becomes ``HttpServer``
    in PascalCase.  Converting a converted value returns it unchanged.
    """
    return _STYLE_RULES[style].join(split_words(value))


def resolve_style(value: str | None, default: NamingStyle) -> NamingStyle:
    """Resolve a configured style alias such as ``"SnakeCase"`` or ``"snake-case"``.

    ``None`` or an empty string selects *default*.  Anything else that does
    not name one of the four styles raises :class:`InvalidNamingStyleError`.
    """
    if not value:
        return default
    key = _ALIAS_NOISE_RE.sub("", value).lower()
    style = _STYLE_ALIASES.get(key)
    if style is None:
        raise InvalidNamingStyleError(value)
    return style
