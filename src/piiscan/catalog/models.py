"""Catalog model — an immutable bundle of content patterns and name rules."""

from __future__ import annotations

from dataclasses import dataclass

from piiscan.scanner.patterns import (
    COLUMN_NAME_RULES,
    CONTENT_PATTERNS,
    ColumnNameRule,
    ContentPattern,
)

BUILTIN_NAME = "builtin"


@dataclass(frozen=True)
class Catalog:
    """The detection rules a scan engine applies, in evaluation order."""

    name: str = BUILTIN_NAME
    content_patterns: tuple[ContentPattern, ...] = CONTENT_PATTERNS
    column_rules: tuple[ColumnNameRule, ...] = COLUMN_NAME_RULES
    description: str = ""


def builtin_catalog() -> Catalog:
    return Catalog(description="Built-in US-centric PII patterns")
