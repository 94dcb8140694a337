"""
Report formatting and export utilities.

Exports inspection reports as JSON, CSV, or console text. Cell values are
rendered through ``format_for_display`` wherever JSON cannot carry them
(raw bytes, dates, arbitrary objects).
"""

import csv
import json
from typing import Any, TextIO

from inspection.cells import format_for_display

from .generator import ReportType


def _json_default(value: Any) -> str:
    return format_for_display(value)


def report_to_json(report: dict[str, Any]) -> str:
    """Serialize a report to an indented JSON string."""
    return json.dumps(report, indent=2, ensure_ascii=False, default=_json_default)


def export_report_json(report: dict[str, Any], output_path: str) -> None:
    """
    Export report to JSON file

    Args:
        report: Report dictionary
        output_path: Path to output file
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(report_to_json(report))
        f.write("\n")


def write_report_csv(report: dict[str, Any], stream: TextIO) -> None:
    """
    Write report rows as CSV to an open text stream

    Quality reports produce one line per finding; diff reports one line
    per differing column (or per one-sided row).
    """
    writer = csv.writer(stream)

    if report["report_type"] == ReportType.QUALITY:
        writer.writerow(["Issue Type", "Key", "Column", "Display Value", "Rows"])
        results = report["results"]
        for group in results["duplicate_groups"]:
            writer.writerow([
                "DUPLICATE_ROW",
                group["signature"],
                "",
                "",
                " ".join(str(i) for i in group["indices"]),
            ])
        for column in results["redundant_columns"]:
            writer.writerow(["REDUNDANT_COLUMN", "", column, "", ""])
        for group in results["name_duplicate_groups"]:
            writer.writerow([
                "IDENTITY_DUPLICATE",
                group["signature"],
                group.get("column", ""),
                group.get("display_value", ""),
                " ".join(str(i) for i in group["indices"]),
            ])
        return

    writer.writerow(["Row", "Status", "Column", "Left Value", "Right Value"])
    for row in report["rows"]:
        left = row.get("left_row") or {}
        right = row.get("right_row") or {}
        if row.get("diff_columns"):
            for column in row["diff_columns"]:
                writer.writerow([
                    row["index"],
                    row["status"],
                    column,
                    format_for_display(left.get(column)),
                    format_for_display(right.get(column)),
                ])
        else:
            writer.writerow([row["index"], row["status"], "", "", ""])


def export_report_csv(report: dict[str, Any], output_path: str) -> None:
    """
    Export report to CSV file

    Args:
        report: Report dictionary
        output_path: Path to output file
    """
    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        write_report_csv(report, f)


def _format_quality_sections(report: dict[str, Any], lines: list[str]) -> None:
    results = report["results"]

    if results["duplicate_groups"]:
        lines.append("DUPLICATE ROWS")
        lines.append("-" * 80)
        for group in results["duplicate_groups"]:
            sample = ", ".join(
                f"{column}={format_for_display(value)}"
                for column, value in group["sample_row"].items()
            )
            lines.append(f"Rows {group['indices']}: {sample}")
        lines.append("")

    if results["redundant_columns"]:
        lines.append("REDUNDANT COLUMNS")
        lines.append("-" * 80)
        lines.append(", ".join(results["redundant_columns"]))
        lines.append("")

    if results["name_duplicate_groups"]:
        lines.append("IDENTITY DUPLICATES")
        lines.append("-" * 80)
        for group in results["name_duplicate_groups"]:
            line = f"{group['column']} = '{group['display_value']}': rows {group['indices']}"
            if group.get("identifiers"):
                line += f" (IDs: {', '.join(group['identifiers'])})"
            lines.append(line)
        lines.append("")


def _format_diff_sections(report: dict[str, Any], lines: list[str]) -> None:
    if not report["rows"]:
        return

    lines.append("ROWS")
    lines.append("-" * 80)
    for row in report["rows"]:
        lines.append(f"Row {row['index']}: {row['status']}")
        left = row.get("left_row") or {}
        right = row.get("right_row") or {}
        for column in row.get("diff_columns") or ():
            lines.append(
                f"  {column}: {format_for_display(left.get(column))!r} "
                f"-> {format_for_display(right.get(column))!r}"
            )
    lines.append("")


def format_report_console(report: dict[str, Any]) -> str:
    """
    Format report for console output

    Args:
        report: Report dictionary

    Returns:
        Formatted string for console display
    """
    lines = []

    title = "DATA QUALITY REPORT" if report["report_type"] == ReportType.QUALITY else "TABLE DIFF REPORT"
    lines.append("=" * 80)
    lines.append(title)
    lines.append("=" * 80)
    lines.append(f"Status: {report['status']}")
    lines.append(f"Timestamp: {report['timestamp']}")
    if report["report_type"] == ReportType.QUALITY:
        if report.get("source"):
            lines.append(f"Source: {report['source']}")
    else:
        if report.get("left_source") or report.get("right_source"):
            lines.append(f"Left: {report.get('left_source')}")
            lines.append(f"Right: {report.get('right_source')}")
    lines.append("")

    lines.append("SUMMARY")
    lines.append("-" * 80)
    lines.append(report["summary"])
    lines.append("")

    if report["report_type"] == ReportType.QUALITY:
        _format_quality_sections(report, lines)
    else:
        _format_diff_sections(report, lines)

    if report.get("recommendations"):
        lines.append("RECOMMENDATIONS")
        lines.append("-" * 80)
        for i, rec in enumerate(report["recommendations"], 1):
            lines.append(f"{i}. {rec}")
        lines.append("")

    lines.append("=" * 80)

    return "\n".join(lines)
