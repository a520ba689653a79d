"""Pattern catalogs — the built-in one and YAML-defined extensions."""

from __future__ import annotations

from piiscan.catalog.loader import load_catalog, load_catalog_from_string
from piiscan.catalog.models import Catalog, builtin_catalog

__all__ = ["Catalog", "builtin_catalog", "load_catalog", "load_catalog_from_string"]
