"""Helpers shared by CLI commands."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from piiscan.catalog import Catalog, builtin_catalog, load_catalog
from piiscan.config import PiiScanConfig
from piiscan.errors import CatalogError

err_console = Console(stderr=True)


def get_config(ctx: click.Context) -> PiiScanConfig:
    ctx.ensure_object(dict)
    config = ctx.obj.get("config")
    if config is None:
        config = PiiScanConfig.load()
        ctx.obj["config"] = config
    return config


def resolve_catalog(config: PiiScanConfig) -> Catalog:
    """Load the configured catalog, exiting with status 1 on errors."""
    if not config.catalog_path:
        return builtin_catalog()
    try:
        return load_catalog(config.catalog_path)
    except CatalogError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
