"""Tabular normalization — CSV and JSON text into column-oriented tables."""

from __future__ import annotations

import json
import re
from typing import Any

from piiscan.errors import JsonParseError

ColumnTable = dict[str, list[str]]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line, honoring double-quoted fields.

    A quote toggles the in-quotes state and is dropped; commas inside
    quotes are literal. Each field is stripped of surrounding whitespace.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quote = False
    for ch in line:
        if ch == '"':
            in_quote = not in_quote
        elif ch == "," and not in_quote:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    fields.append("".join(current).strip())
    return fields


def normalize_csv(text: str) -> ColumnTable:
    """Parse CSV text into a column table keyed by the header row."""
    lines = [line for line in _LINE_BREAK.split(text) if line.strip()]
    if not lines:
        return {}

    headers = split_csv_line(lines[0])
    columns: ColumnTable = {h: [] for h in headers}

    for line in lines[1:]:
        values = split_csv_line(line)
        # Short rows simply contribute nothing to the missing columns
        for header, value in zip(headers, values):
            columns[header].append(value)

    return columns


def normalize_json(text: str) -> ColumnTable:
    """Parse JSON text into a column table.

    Accepts a top-level array of objects, or an object wrapping one under
    ``data`` or ``rows``. Any other value is treated as a single row.

    Raises:
        JsonParseError: if *text* is not valid JSON.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise JsonParseError(f"Invalid JSON: {e}") from e

    rows = _resolve_rows(data)
    if not rows or not isinstance(rows[0], dict):
        return {}

    columns: ColumnTable = {}
    for row in rows:
        if not isinstance(row, dict):
            continue
        for key, value in row.items():
            columns.setdefault(key, []).append(stringify(value))
    return columns


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _resolve_rows(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("data", "rows"):
            wrapped = data.get(key)
            if isinstance(wrapped, list):
                return wrapped
    return [data]


def stringify(value: Any) -> str:
    """Render a JSON value as scannable text.

    Strings pass through, null becomes empty, booleans are lowercase,
    integral floats drop their ``.0`` and nested structures become
    compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
