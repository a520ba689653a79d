"""CLI command: piiscan scan <file> — scan a CSV or JSON dataset."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from piiscan.cli.common import err_console, get_config, resolve_catalog
from piiscan.errors import InputReadError
from piiscan.report import print_report
from piiscan.scanner.engine import ScanEngine
from piiscan.scanner.models import RiskLevel, ScanResult
from piiscan.source import read_dataset

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_HIGH_RISK = 2


@click.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON.")
@click.option("--no-color", is_flag=True, help="Disable color output.")
@click.pass_context
def scan(ctx: click.Context, file: str, as_json: bool, no_color: bool) -> None:
    """Scan a CSV or JSON FILE for likely PII.

    Exits 0 when nothing is found, 1 when findings are present and 2 when
    the overall risk is HIGH.
    """
    config = get_config(ctx)
    catalog = resolve_catalog(config)

    path = Path(file).resolve()
    try:
        content = read_dataset(path)
    except InputReadError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    engine = ScanEngine(
        catalog=catalog,
        sample_limit=config.sample_limit,
        max_samples=config.max_samples,
    )
    result = engine.scan_content(content, str(path))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        plain = no_color or not config.color
        console = Console(no_color=plain, highlight=False)
        print_report(result, console)

    sys.exit(exit_code(result))


def exit_code(result: ScanResult) -> int:
    """Map a scan result onto the process exit status."""
    if result.overall_risk == RiskLevel.HIGH:
        return EXIT_HIGH_RISK
    if result.findings:
        return EXIT_FINDINGS
    return EXIT_CLEAN
