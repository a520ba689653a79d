"""Global configuration — XDG paths, env vars, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from piiscan.scanner.engine import MAX_SAMPLES, SAMPLE_LIMIT

logger = logging.getLogger(__name__)


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "piiscan"
    return Path.home() / ".config" / "piiscan"


@dataclass
class PiiScanConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    catalog_path: Path | None = None
    sample_limit: int = SAMPLE_LIMIT
    max_samples: int = MAX_SAMPLES
    color: bool = True
    verbose: bool = False

    @classmethod
    def load(cls) -> PiiScanConfig:
        """Load config from environment variables with XDG defaults."""
        config = cls()

        env_catalog = os.environ.get("PIISCAN_CATALOG")
        if env_catalog:
            config.catalog_path = Path(env_catalog)
        else:
            # Pick up a user catalog from the config dir if one exists
            user_catalog = config.config_dir / "catalog.yaml"
            if user_catalog.is_file():
                config.catalog_path = user_catalog

        env_limit = os.environ.get("PIISCAN_SAMPLE_LIMIT")
        if env_limit:
            limit = int(env_limit)
            if limit < 1:
                logger.warning(
                    "PIISCAN_SAMPLE_LIMIT=%s is below 1; using 1", env_limit
                )
                limit = 1
            config.sample_limit = limit

        if os.environ.get("NO_COLOR"):
            config.color = False

        return config
