"""Exception hierarchy."""

from __future__ import annotations


class PiiScanError(Exception):
    """Base class for all piiscan errors."""


class InputReadError(PiiScanError):
    """A dataset file could not be read or decoded."""


class JsonParseError(PiiScanError, ValueError):
    """Dataset text is not valid JSON."""


class CatalogError(PiiScanError, ValueError):
    """A custom pattern catalog is malformed."""
