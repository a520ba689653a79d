"""piiscan — local heuristic PII risk scanner for CSV and JSON datasets.

Diagnostic aid only. It does not guarantee detection of all PII and makes
no network calls.
"""

from __future__ import annotations

__version__ = "0.1.0"

from piiscan.scanner.engine import ScanEngine, scan_columns, scan_content
from piiscan.scanner.models import ColumnFinding, FindingSource, RiskLevel, ScanResult
from piiscan.scanner.patterns import COLUMN_NAME_RULES, CONTENT_PATTERNS

__all__ = [
    "__version__",
    "COLUMN_NAME_RULES",
    "CONTENT_PATTERNS",
    "ColumnFinding",
    "FindingSource",
    "RiskLevel",
    "ScanEngine",
    "ScanResult",
    "scan_columns",
    "scan_content",
]
