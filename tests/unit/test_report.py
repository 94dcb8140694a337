"""
Unit tests for inspection report generation and formatting.
"""

import csv
import io
import json

from inspection.compare import diff_tables
from inspection.quality import analyze_data_quality
from inspection.report import (
    ReportType,
    export_report_csv,
    export_report_json,
    format_report_console,
    generate_diff_report,
    generate_quality_report,
    report_to_json,
    write_report_csv,
)

COLUMNS = ["Oid", "Email", "Country", "Notes"]


class TestGenerateQualityReport:
    """Test quality report generation."""

    def test_issues_found(self, customer_rows):
        summary = analyze_data_quality(customer_rows, COLUMNS)

        report = generate_quality_report(summary, len(customer_rows), COLUMNS, source="customers.json")

        assert report["report_type"] == ReportType.QUALITY
        assert report["status"] == "ISSUES_FOUND"
        assert report["source"] == "customers.json"
        assert report["row_count"] == 4
        assert report["results"]["duplicate_indices"] == [0, 2]
        assert "1 duplicate group(s)" in report["summary"]
        assert any("Country, Notes" in rec for rec in report["recommendations"])
        assert "'Bob' in column Oid refers to 2 different records (IDs: 2, 7); " \
            "check for duplicated reference data" in report["recommendations"]
        assert "'Alice' in column Oid refers to 2 rows; " \
            "check for duplicated reference data" in report["recommendations"]

    def test_pass(self):
        rows = [{"a": 1}, {"a": 2}]
        summary = analyze_data_quality(rows, ["a"], name_columns=[])

        report = generate_quality_report(summary, 2, ["a"])

        assert report["status"] == "PASS"
        assert report["recommendations"] == []

    def test_no_data(self):
        summary = analyze_data_quality([], ["a"])

        report = generate_quality_report(summary, 0, ["a"])

        assert report["status"] == "NO_DATA"
        assert report["recommendations"] == []


class TestGenerateDiffReport:
    """Test diff report generation."""

    def test_mismatch_lists_only_changed_rows(self):
        results = diff_tables([{"a": 1}, {"a": 2}], [{"a": 1}, {"a": 3}, {"a": 4}], ["a"])

        report = generate_diff_report(results, ["a"], left_source="l.json", right_source="r.json")

        assert report["status"] == "MISMATCH"
        assert [row["index"] for row in report["rows"]] == [1, 2]
        assert report["rows"][0]["diff_columns"] == ["a"]
        assert report["rows"][1]["status"] == "right-only"
        assert report["counts"]["same"] == 1

    def test_include_same(self):
        results = diff_tables([{"a": 1}], [{"a": 1}], ["a"])

        report = generate_diff_report(results, ["a"], include_same=True)

        assert report["status"] == "MATCH"
        assert report["rows"] == [
            {"index": 0, "status": "same", "left_row": {"a": 1}, "right_row": {"a": 1}}
        ]

    def test_no_data(self):
        assert generate_diff_report({}, [])["status"] == "NO_DATA"


class TestFormatters:
    """Test console, JSON and CSV output."""

    def test_console_quality(self, customer_rows):
        report = generate_quality_report(
            analyze_data_quality(customer_rows, COLUMNS), 4, COLUMNS, source="customers.json"
        )

        text = format_report_console(report)

        assert "DATA QUALITY REPORT" in text
        assert "Source: customers.json" in text
        assert "DUPLICATE ROWS" in text
        assert "REDUNDANT COLUMNS" in text
        assert "Oid = 'Alice': rows [0, 2] (IDs: 1)" in text
        assert "Oid = 'Bob': rows [1, 3] (IDs: 2, 7)" in text
        assert "RECOMMENDATIONS" in text

    def test_console_diff_renders_cells(self):
        left = [{"Logo": {"type": "Buffer", "data": [1, 2]}}]
        right = [{"Logo": {"type": "Buffer", "data": [1, 2, 3]}}]
        report = generate_diff_report(diff_tables(left, right, ["Logo"]), ["Logo"])

        text = format_report_console(report)

        assert "TABLE DIFF REPORT" in text
        assert "Row 0: different" in text
        assert "'[Binary Data - 2 bytes]' -> '[Binary Data - 3 bytes]'" in text

    def test_json_handles_raw_bytes(self):
        results = diff_tables([{"blob": b"\x00\x01"}], [], ["blob"])
        report = generate_diff_report(results, ["blob"])

        parsed = json.loads(report_to_json(report))

        assert parsed["rows"][0]["left_row"]["blob"] == "[Binary Data - 2 bytes]"

    def test_export_json(self, tmp_path):
        report = generate_diff_report(diff_tables([], [{"a": 1}], ["a"]), ["a"])
        output = tmp_path / "diff.json"

        export_report_json(report, str(output))

        assert json.loads(output.read_text())["counts"]["right_only"] == 1

    def test_csv_quality(self, customer_rows):
        report = generate_quality_report(analyze_data_quality(customer_rows, COLUMNS), 4, COLUMNS)
        buffer = io.StringIO()

        write_report_csv(report, buffer)

        rows = list(csv.reader(io.StringIO(buffer.getvalue())))
        assert rows[0] == ["Issue Type", "Key", "Column", "Display Value", "Rows"]
        issue_types = [row[0] for row in rows[1:]]
        assert issue_types == [
            "DUPLICATE_ROW",
            "REDUNDANT_COLUMN",
            "REDUNDANT_COLUMN",
            "IDENTITY_DUPLICATE",
            "IDENTITY_DUPLICATE",
        ]
        assert rows[4][2:] == ["Oid", "Alice", "0 2"]

    def test_export_csv_diff(self, tmp_path):
        results = diff_tables([{"a": 1, "b": 2}], [{"a": 1, "b": 3}], ["a", "b"])
        report = generate_diff_report(results, ["a", "b"])
        output = tmp_path / "diff.csv"

        export_report_csv(report, str(output))

        with open(output, newline="") as f:
            rows = list(csv.reader(f))
        assert rows == [
            ["Row", "Status", "Column", "Left Value", "Right Value"],
            ["0", "different", "b", "2", "3"],
        ]
