"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from piiscan import __version__
from piiscan.config import PiiScanConfig


@click.group()
@click.version_option(version=__version__, prog_name="piiscan")
@click.option(
    "--catalog",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML pattern catalog.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, catalog: str | None, verbose: bool) -> None:
    """piiscan — local PII risk scanner for CSV and JSON datasets.

    Diagnostic aid only, not a compliance control. No data leaves your machine.
    """
    config = PiiScanConfig.load()
    if catalog:
        config.catalog_path = Path(catalog)
    config.verbose = verbose

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from piiscan.cli.patterns import patterns  # noqa: F811
    from piiscan.cli.scan import scan  # noqa: F811

    main.add_command(scan)
    main.add_command(patterns)


_register_commands()
