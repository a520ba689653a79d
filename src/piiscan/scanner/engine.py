"""Scan engine — applies the pattern catalog to column tables."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from piiscan.catalog.models import Catalog, builtin_catalog
from piiscan.errors import JsonParseError
from piiscan.scanner.models import ColumnFinding, FindingSource, RiskLevel, ScanResult
from piiscan.scanner.redact import redact
from piiscan.scanner.tabular import normalize_csv, normalize_json

logger = logging.getLogger(__name__)

# Max values per column joined for content matching
SAMPLE_LIMIT = 200

# Redacted examples kept per content finding
MAX_SAMPLES = 3

# Column used when JSON input cannot be parsed
TEXT_COLUMN = "_text"

NO_FINDINGS_SUMMARY = "No PII patterns detected. Review manually before use."
CAUTION = "Do not use this dataset in lower environments without synthetic replacement."


class ScanEngine:
    """Scans column tables for PII using an immutable catalog."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        sample_limit: int = SAMPLE_LIMIT,
        max_samples: int = MAX_SAMPLES,
    ) -> None:
        if sample_limit < 1:
            raise ValueError(
                f"sample_limit must be at least 1, got {sample_limit}"
            )
        self._catalog = catalog or builtin_catalog()
        self._sample_limit = sample_limit
        self._max_samples = max_samples

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def scan_content(self, text: str, file_path: str) -> ScanResult:
        """Normalize raw text by file suffix and scan it.

        ``.json`` paths are parsed as JSON and fall back to one column of
        raw lines when the text is not valid JSON. Everything else is CSV.
        """
        if file_path.endswith(".json"):
            try:
                columns = normalize_json(text)
            except JsonParseError as e:
                logger.warning("%s: %s; scanning as plain text", file_path, e)
                columns = {TEXT_COLUMN: text.split("\n")}
        else:
            columns = normalize_csv(text)

        return self.scan_columns(columns, file_path)

    def scan_columns(
        self,
        columns: Mapping[str, Sequence[str]],
        file_path: str,
    ) -> ScanResult:
        """Scan an already-normalized column table."""
        findings: list[ColumnFinding] = []

        for column, values in columns.items():
            column_findings = self._scan_column(column, values)
            logger.debug("Column %r: %d finding(s)", column, len(column_findings))
            findings.extend(column_findings)

        rows = max((len(v) for v in columns.values()), default=0)
        overall = max((f.risk for f in findings), default=RiskLevel.LOW)

        return ScanResult(
            file=file_path,
            rows_scanned=rows,
            columns_scanned=len(columns),
            findings=tuple(findings),
            overall_risk=overall,
            summary=summarize(findings),
        )

    def _scan_column(self, column: str, values: Sequence[str]) -> list[ColumnFinding]:
        findings: list[ColumnFinding] = []

        # One name finding per column is enough
        for rule in self._catalog.column_rules:
            if rule.matches(column):
                findings.append(
                    ColumnFinding(
                        column=column,
                        pattern_name=rule.label,
                        risk=rule.risk,
                        match_count=len(values),
                        source=FindingSource.COLUMN_NAME,
                    )
                )
                break

        sample = "\n".join(values[: self._sample_limit])
        for pattern in self._catalog.content_patterns:
            matches = pattern.find_all(sample)
            if not matches:
                continue
            findings.append(
                ColumnFinding(
                    column=column,
                    pattern_name=pattern.name,
                    risk=pattern.risk,
                    match_count=len(matches),
                    sample_values=tuple(
                        redact(m) for m in matches[: self._max_samples]
                    ),
                    source=FindingSource.CONTENT,
                )
            )

        return findings


def summarize(findings: Sequence[ColumnFinding]) -> str:
    """Build the one-line human summary for a set of findings."""
    if not findings:
        return NO_FINDINGS_SUMMARY

    column_count = len({f.column for f in findings})
    high_count = sum(1 for f in findings if f.risk == RiskLevel.HIGH)

    parts = [
        f"{len(findings)} potential PII finding(s) across {column_count} column(s)."
    ]
    if high_count > 0:
        parts.append(f"{high_count} HIGH risk.")
    parts.append(CAUTION)
    return " ".join(parts)


def scan_content(
    text: str, file_path: str, catalog: Catalog | None = None
) -> ScanResult:
    """Scan raw CSV or JSON text with a fresh engine."""
    return ScanEngine(catalog).scan_content(text, file_path)


def scan_columns(
    columns: Mapping[str, Sequence[str]],
    file_path: str,
    catalog: Catalog | None = None,
) -> ScanResult:
    """Scan a column table with a fresh engine."""
    return ScanEngine(catalog).scan_columns(columns, file_path)
