"""Tests for the scan engine."""

from __future__ import annotations

from pathlib import Path

import pytest

from piiscan.catalog import Catalog
from piiscan.scanner.engine import (
    NO_FINDINGS_SUMMARY,
    TEXT_COLUMN,
    ScanEngine,
    scan_columns,
    scan_content,
)
from piiscan.scanner.models import FindingSource, RiskLevel


class TestScanColumns:
    def test_empty_table(self):
        result = scan_columns({}, "empty.csv")
        assert result.rows_scanned == 0
        assert result.columns_scanned == 0
        assert result.findings == ()
        assert result.overall_risk == RiskLevel.LOW
        assert result.summary == NO_FINDINGS_SUMMARY

    def test_column_name_only(self):
        result = scan_columns({"ssn": ["123", "456"]}, "t.csv")
        assert len(result.findings) == 1
        finding = result.findings[0]
        assert finding.source == FindingSource.COLUMN_NAME
        assert finding.risk == RiskLevel.HIGH
        assert finding.match_count == 2
        assert finding.sample_values == ()
        assert finding.pattern_name == "SSN column"

    def test_content_detection_is_deterministic(self):
        table = {"message": ["Contact: alice@example.com"]}
        first = scan_columns(table, "t.csv")
        second = scan_columns(table, "t.csv")
        assert first == second
        (finding,) = first.findings
        assert finding.pattern_name == "Email Address"
        assert finding.match_count == 1
        assert finding.sample_values == ("al********om",)

    def test_sampling_cap(self):
        result = scan_columns({"contact": ["alice@example.com"] * 500}, "t.csv")
        (finding,) = result.findings
        assert finding.match_count == 200
        assert len(finding.sample_values) == 3
        assert result.rows_scanned == 500

    def test_custom_sample_limit(self):
        engine = ScanEngine(sample_limit=10, max_samples=1)
        result = engine.scan_columns({"contact": ["a@b.com"] * 50}, "t.csv")
        (finding,) = result.findings
        assert finding.match_count == 10
        assert finding.sample_values == ("a@***om",)

    @pytest.mark.parametrize("limit", [0, -5])
    def test_sample_limit_must_be_positive(self, limit):
        with pytest.raises(ValueError, match="sample_limit"):
            ScanEngine(sample_limit=limit)

    def test_multi_pattern_column(self):
        result = scan_columns(
            {"notes": ["reach me at bob@example.com", "123456789"]}, "t.csv"
        )
        names = [f.pattern_name for f in result.findings]
        assert names == [
            "Email Address",
            "SSN (US Social Security Number)",
            "Bank Routing Number (ABA)",
        ]
        email = result.findings[0]
        assert email.match_count == 1
        assert email.sample_values == ("bo********om",)
        routing = result.findings[2]
        assert routing.match_count == 1
        assert routing.sample_values == ("12*****89",)

    def test_findings_ordered_by_column_then_catalog(self):
        result = scan_columns(
            {
                "email": ["x@y.com"],
                "server": ["10.0.0.1"],
            },
            "t.csv",
        )
        assert [(f.column, f.source) for f in result.findings] == [
            ("email", FindingSource.COLUMN_NAME),
            ("email", FindingSource.CONTENT),
            ("server", FindingSource.CONTENT),
        ]

    def test_rows_scanned_is_longest_column(self):
        result = scan_columns({"a": ["1"], "b": ["1", "2", "3"], "c": []}, "t.csv")
        assert result.rows_scanned == 3
        assert result.columns_scanned == 3

    def test_low_only_findings(self):
        result = scan_columns({"code": ["12345"]}, "t.csv")
        (finding,) = result.findings
        assert finding.pattern_name == "US ZIP Code"
        assert result.overall_risk == RiskLevel.LOW
        assert result.summary == (
            "1 potential PII finding(s) across 1 column(s). "
            "Do not use this dataset in lower environments "
            "without synthetic replacement."
        )

    def test_medium_overall(self):
        result = scan_columns({"ref": ["192.168.1.10"]}, "t.csv")
        assert [f.pattern_name for f in result.findings] == ["IPv4 Address"]
        assert result.overall_risk == RiskLevel.MEDIUM

    def test_summary_mentions_high_count(self):
        result = scan_columns({"email": ["alice@example.com"]}, "t.csv")
        assert result.summary == (
            "2 potential PII finding(s) across 1 column(s). 2 HIGH risk. "
            "Do not use this dataset in lower environments "
            "without synthetic replacement."
        )

    def test_file_hint_is_opaque(self):
        assert scan_columns({}, "anything at all").file == "anything at all"

    @pytest.mark.parametrize(
        "table",
        [
            {},
            {"x": ["nothing"]},
            {"code": ["12345"]},
            {"ref": ["192.168.1.10"]},
            {"ssn": ["1"]},
            {"email": ["a@b.com"], "code": ["12345"]},
        ],
    )
    def test_overall_low_iff_no_risky_findings(self, table):
        result = scan_columns(table, "t.csv")
        all_low = all(f.risk == RiskLevel.LOW for f in result.findings)
        assert (result.overall_risk == RiskLevel.LOW) == all_low
        if result.findings:
            assert result.overall_risk == max(f.risk for f in result.findings)

    def test_custom_catalog(self, employee_catalog: Catalog):
        engine = ScanEngine(catalog=employee_catalog)
        result = engine.scan_columns(
            {"employee_id": ["EMP-123456", "EMP-654321"], "email": ["a@b.com"]},
            "t.csv",
        )
        assert engine.catalog is employee_catalog
        assert [f.pattern_name for f in result.findings] == [
            "Employee ID column",
            "Employee ID",
        ]
        assert result.overall_risk == RiskLevel.MEDIUM


class TestScanContent:
    def test_csv(self):
        result = scan_content("name,email\nAlice,alice@example.com\n", "people.csv")
        assert result.columns_scanned == 2
        assert result.rows_scanned == 1
        assert {f.column for f in result.findings} == {"email"}
        assert result.overall_risk == RiskLevel.HIGH

    def test_json_shapes_scan_identically(self):
        bare = scan_content('[{"email":"a@b.com"}]', "x.json")
        wrapped = scan_content('{"data": [{"email":"a@b.com"}]}', "x.json")
        assert bare == wrapped

    def test_malformed_json_falls_back_to_text(self):
        result = scan_content("{not valid", "broken.json")
        assert result.columns_scanned == 1
        assert result.rows_scanned == 1
        assert result.findings == ()

    def test_deeply_nested_json_falls_back_to_text(self):
        result = scan_content("[" * 100000 + "]" * 100000, "deep.json")
        assert result.columns_scanned == 1
        assert result.rows_scanned == 1
        assert result.findings == ()

    def test_deeply_nested_value_falls_back_to_text(self):
        text = '[{"a": ' + "[" * 5000 + "]" * 5000 + "}]"
        result = scan_content(text, "deep.json")
        assert result.columns_scanned == 1
        assert result.to_dict()["columnsScanned"] == 1

    def test_non_standard_constants_fall_back_to_text(self):
        result = scan_content('[{"a": NaN, "b": Infinity}]', "x.json")
        assert result.columns_scanned == 1
        assert result.rows_scanned == 1

    def test_malformed_json_text_is_scanned(self):
        result = scan_content("{oops\ncontact alice@example.com\n", "broken.json")
        assert result.columns_scanned == 1
        assert result.rows_scanned == 3
        assert [(f.column, f.pattern_name) for f in result.findings] == [
            (TEXT_COLUMN, "Email Address")
        ]

    def test_suffix_check_is_case_sensitive(self):
        # Upper-case suffix is treated as CSV, so the JSON text becomes a header
        result = scan_content('[{"a": "b"}]', "DATA.JSON")
        assert result.rows_scanned == 0

    def test_other_suffixes_are_csv(self):
        result = scan_content("ip\n10.0.0.1\n", "log.txt")
        assert [f.pattern_name for f in result.findings] == ["IPv4 Address"]

    def test_empty_text(self):
        assert scan_content("", "x.csv").columns_scanned == 0
        assert scan_content("", "x.json").columns_scanned == 1

    def test_customers_fixture(self, customers_csv: Path):
        result = scan_content(customers_csv.read_text(), str(customers_csv))
        assert result.rows_scanned == 3
        assert result.columns_scanned == 6
        assert result.overall_risk == RiskLevel.HIGH

        by_column = {}
        for f in result.findings:
            by_column.setdefault(f.column, []).append(f.pattern_name)
        assert by_column["email"] == ["Email column", "Email Address"]
        assert by_column["phone"] == ["Phone column", "US Phone Number"]
        assert by_column["full_name"] == ["Name column"]
        assert "Street Address" in by_column["notes"]
        assert by_column["zip"][0] == "Address column"
        assert "US ZIP Code" in by_column["zip"]
        assert "id" not in by_column

    def test_users_fixture(self, users_json: Path):
        result = scan_content(users_json.read_text(), str(users_json))
        assert result.rows_scanned == 3
        assert result.columns_scanned == 4

        contact = [f for f in result.findings if f.column == "contact"]
        assert [f.pattern_name for f in contact] == ["Email Address"]
        assert contact[0].match_count == 2

        ips = [f for f in result.findings if f.column == "last_login_ip"]
        assert [f.pattern_name for f in ips] == ["IPv4 Address"]
        assert ips[0].match_count == 3
        assert result.overall_risk == RiskLevel.HIGH
