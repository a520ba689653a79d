"""Report rendering — builds Rich renderables from a ScanResult."""

from __future__ import annotations

from rich.console import Console, Group
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from piiscan.scanner.models import ColumnFinding, FindingSource, RiskLevel, ScanResult

_RISK_COLORS = {
    RiskLevel.HIGH: "red",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.LOW: "green",
}

DISCLAIMER = (
    "DISCLAIMER: Diagnostic aid only. Not a compliance control.\n"
    "False positives and negatives are possible."
)


def risk_badge(risk: RiskLevel) -> Text:
    return Text(f"[{risk.value}]", style=f"bold {_RISK_COLORS[risk]}")


def group_by_column(result: ScanResult) -> list[tuple[str, list[ColumnFinding]]]:
    """Findings grouped per column, highest-risk columns first.

    Columns of equal risk keep their scan order.
    """
    groups: dict[str, list[ColumnFinding]] = {}
    for finding in result.findings:
        groups.setdefault(finding.column, []).append(finding)
    return sorted(
        groups.items(),
        key=lambda item: -max(f.risk for f in item[1]).rank,
    )


def describe_source(finding: ColumnFinding) -> str:
    if finding.source == FindingSource.COLUMN_NAME:
        return "(column name)"
    noun = "match" if finding.match_count == 1 else "matches"
    return f"({finding.match_count} {noun} in content)"


def render_report(result: ScanResult) -> Group:
    """Build the full human-readable report."""
    parts: list = [
        Text.assemble(
            ("piiscan", "bold"), (" — local PII risk scanner", "dim")
        ),
        Rule(style="dim"),
        Text(
            f"  File   : {result.file}\n"
            f"  Rows   : {result.rows_scanned:,}\n"
            f"  Columns: {result.columns_scanned}"
        ),
        Rule(style="dim"),
    ]

    if not result.findings:
        parts.append(Text("\n  No PII patterns detected.", style="bold green"))
        parts.append(
            Text(
                "  Review manually before use. Automated detection has limits.\n",
                style="dim",
            )
        )
        return Group(*parts)

    parts.append(Text("\n  Findings\n", style="bold"))
    parts.append(_findings_table(result))

    counts = Text("  Findings     : ")
    if result.high_count:
        counts.append(f"{result.high_count} HIGH  ", style="red")
    if result.medium_count:
        counts.append(f"{result.medium_count} MEDIUM  ", style="yellow")
    counts.append(f"{len(result.findings)} total")

    parts.extend(
        [
            Rule(style="dim"),
            Text.assemble("  Overall risk : ", risk_badge(result.overall_risk)),
            counts,
            Text(f"\n  {result.summary}\n", style="bold yellow"),
            Text(DISCLAIMER, style="dim"),
        ]
    )
    return Group(*parts)


def _findings_table(result: ScanResult) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("Risk", width=8)
    table.add_column("Column", style="bold")
    table.add_column("Pattern")
    table.add_column("Source", style="dim")
    table.add_column("Samples", style="dim")

    for column, findings in group_by_column(result):
        column_risk = max(f.risk for f in findings)
        for i, finding in enumerate(findings):
            table.add_row(
                risk_badge(column_risk) if i == 0 else "",
                Text(column) if i == 0 else "",
                Text(finding.pattern_name),
                describe_source(finding),
                Text(", ".join(finding.sample_values)),
            )
        table.add_row()
    return table


def print_report(result: ScanResult, console: Console) -> None:
    console.print(render_report(result))
