"""Load Catalog objects from YAML files."""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from piiscan.catalog.models import BUILTIN_NAME, Catalog, builtin_catalog
from piiscan.errors import CatalogError
from piiscan.scanner.models import RiskLevel
from piiscan.scanner.patterns import ColumnNameRule, ContentPattern, name_rule


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog from a YAML file path."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    return load_catalog_from_string(text)


def load_catalog_from_string(text: str) -> Catalog:
    """Parse a YAML string into a Catalog."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid catalog YAML: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError("Catalog YAML must be a mapping")
    return _build_catalog(data)


def _build_catalog(data: dict) -> Catalog:
    name = data.get("name", "unnamed")

    content = tuple(_parse_content_patterns(data.get("content_patterns") or []))
    rules = tuple(_parse_column_rules(data.get("column_names") or []))

    extends = data.get("extends")
    if extends:
        if extends != BUILTIN_NAME:
            raise CatalogError(f"Unknown base catalog: {extends}")
        # Built-in entries first; first-match-wins keeps their precedence
        base = builtin_catalog()
        content = base.content_patterns + content
        rules = base.column_rules + rules

    return Catalog(
        name=name,
        content_patterns=content,
        column_rules=rules,
        description=data.get("description", ""),
    )


def _parse_content_patterns(entries: list) -> list[ContentPattern]:
    patterns: list[ContentPattern] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise CatalogError(f"Content pattern must be a mapping: {entry!r}")
        name = _require(entry, "name")
        flags = re.ASCII
        if entry.get("ignore_case", False):
            flags |= re.IGNORECASE
        patterns.append(
            ContentPattern(
                name=name,
                description=entry.get("description", ""),
                risk=_parse_risk(entry.get("risk", "MEDIUM"), name),
                regex=_compile(_require(entry, "regex"), flags, name),
            )
        )
    return patterns


def _parse_column_rules(entries: list) -> list[ColumnNameRule]:
    rules: list[ColumnNameRule] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise CatalogError(f"Column rule must be a mapping: {entry!r}")
        label = _require(entry, "label")
        risk = _parse_risk(entry.get("risk", "MEDIUM"), label)
        if "terms" in entry:
            terms = entry["terms"]
            if isinstance(terms, str):
                terms = [terms]
            rules.append(name_rule("|".join(re.escape(t) for t in terms), risk, label))
            continue
        regex = _compile(_require(entry, "regex"), re.IGNORECASE | re.ASCII, label)
        rules.append(ColumnNameRule(regex=regex, risk=risk, label=label))
    return rules


def _require(entry: dict, key: str) -> str:
    value = entry.get(key)
    if not value:
        raise CatalogError(f"Catalog entry missing '{key}': {entry!r}")
    return str(value)


def _parse_risk(raw: object, owner: str) -> RiskLevel:
    try:
        return RiskLevel(str(raw).upper())
    except ValueError:
        raise CatalogError(f"{owner}: invalid risk level {raw!r}") from None


def _compile(pattern: str, flags: int, owner: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise CatalogError(f"{owner}: invalid regex: {e}") from e
