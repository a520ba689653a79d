"""Shared test fixtures."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from piiscan.catalog import Catalog
from piiscan.scanner.models import RiskLevel
from piiscan.scanner.patterns import ContentPattern, name_rule


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user config and env vars from leaking into tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for var in ("PIISCAN_CATALOG", "PIISCAN_SAMPLE_LIMIT", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def customers_csv(fixtures_dir: Path) -> Path:
    return fixtures_dir / "customers.csv"


@pytest.fixture
def users_json(fixtures_dir: Path) -> Path:
    return fixtures_dir / "users.json"


@pytest.fixture
def acme_catalog_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "acme_catalog.yaml"


@pytest.fixture
def employee_catalog() -> Catalog:
    return Catalog(
        name="employees",
        content_patterns=(
            ContentPattern(
                name="Employee ID",
                description="ACME employee numbers",
                risk=RiskLevel.MEDIUM,
                regex=re.compile(r"\bEMP-\d{6}\b"),
            ),
        ),
        column_rules=(
            name_rule(r"employee.?id|emp_no", RiskLevel.MEDIUM, "Employee ID column"),
        ),
    )
