"""Naming-style predicates, conversion and alias resolution."""

from prismalint.naming.styles import (
    NamingStyle,
    convert,
    is_camel_case,
    is_pascal_case,
    is_screaming_snake_case,
    is_snake_case,
    matches_style,
    resolve_style,
    split_words,
)

__all__ = [
    "NamingStyle",
    "convert",
    "is_camel_case",
    "is_pascal_case",
    "is_screaming_snake_case",
    "is_snake_case",
    "matches_style",
    "resolve_style",
    "split_words",
]
