"""Dataset I/O — reading files into text for the scanner."""

from __future__ import annotations

import logging
from pathlib import Path

from piiscan.errors import InputReadError

logger = logging.getLogger(__name__)


def read_dataset(path: str | Path) -> str:
    """Read a dataset file as UTF-8 text."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Error reading file: {e}") from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text
