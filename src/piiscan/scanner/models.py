"""Scanner data models — risk levels, findings and scan results."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass, field


@functools.total_ordering
class RiskLevel(enum.Enum):
    """Coarse severity tag, ordered LOW < MEDIUM < HIGH."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank


_RISK_RANK = {RiskLevel.LOW: 1, RiskLevel.MEDIUM: 2, RiskLevel.HIGH: 3}


class FindingSource(enum.Enum):
    """Where a finding came from."""

    CONTENT = "content"
    COLUMN_NAME = "column_name"


@dataclass(frozen=True)
class ColumnFinding:
    """A single detection in one column."""

    column: str
    pattern_name: str
    risk: RiskLevel
    match_count: int
    sample_values: tuple[str, ...] = ()
    source: FindingSource = FindingSource.CONTENT

    def to_dict(self) -> dict:
        return {
            "column": self.column,
            "patternName": self.pattern_name,
            "risk": self.risk.value,
            "matchCount": self.match_count,
            "sampleValues": list(self.sample_values),
            "source": self.source.value,
        }


@dataclass(frozen=True)
class ScanResult:
    """Aggregate result of scanning one dataset."""

    file: str
    rows_scanned: int = 0
    columns_scanned: int = 0
    findings: tuple[ColumnFinding, ...] = field(default_factory=tuple)
    overall_risk: RiskLevel = RiskLevel.LOW
    summary: str = ""

    @property
    def high_count(self) -> int:
        return sum(1 for f in self.findings if f.risk == RiskLevel.HIGH)

    @property
    def medium_count(self) -> int:
        return sum(1 for f in self.findings if f.risk == RiskLevel.MEDIUM)

    @property
    def flagged_columns(self) -> list[str]:
        """Distinct columns with at least one finding, in finding order."""
        return list(dict.fromkeys(f.column for f in self.findings))

    def to_dict(self) -> dict:
        """Serializable form with the stable camelCase keys."""
        return {
            "file": self.file,
            "rowsScanned": self.rows_scanned,
            "columnsScanned": self.columns_scanned,
            "findings": [f.to_dict() for f in self.findings],
            "overallRisk": self.overall_risk.value,
            "summary": self.summary,
        }
