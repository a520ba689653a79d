"""Masking of matched values before they are shown to anyone."""

from __future__ import annotations

MASK = "*"
SHORT_VALUE_MASK = MASK * 4
MAX_MASK_WIDTH = 8


def redact(value: str) -> str:
    """Keep the first and last two characters, mask the middle.

    Values of four characters or fewer are fully masked. The masked run
    is capped at eight characters, so long values do not leak their length.
    """
    if len(value) <= 4:
        return SHORT_VALUE_MASK
    width = min(len(value) - 4, MAX_MASK_WIDTH)
    return value[:2] + MASK * width + value[-2:]
