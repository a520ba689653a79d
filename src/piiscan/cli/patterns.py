"""CLI command: piiscan patterns — list the active detection catalog."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from piiscan.cli.common import get_config, resolve_catalog
from piiscan.report import risk_badge

console = Console()


@click.command()
@click.pass_context
def patterns(ctx: click.Context) -> None:
    """List content patterns and column-name rules."""
    catalog = resolve_catalog(get_config(ctx))

    console.print(f"[bold]Catalog[/bold] [cyan]{escape(catalog.name)}[/cyan]\n")

    content = Table(title="Content patterns")
    content.add_column("Risk", width=10)
    content.add_column("Name", style="bold")
    content.add_column("Description")
    for pattern in catalog.content_patterns:
        content.add_row(
            risk_badge(pattern.risk), Text(pattern.name), Text(pattern.description)
        )
    console.print(content)

    names = Table(title="Column-name rules (first match wins)")
    names.add_column("Risk", width=10)
    names.add_column("Label", style="bold")
    names.add_column("Regex", style="dim")
    for rule in catalog.column_rules:
        names.add_row(
            risk_badge(rule.risk), Text(rule.label), Text(rule.regex.pattern)
        )
    console.print(names)
