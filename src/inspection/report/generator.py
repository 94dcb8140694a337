"""
Report generation from inspection results.

Builds serializable report dictionaries from a data quality analysis or a
table diff, with a human-readable summary and recommended actions.
"""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from inspection.compare import ComparisonResult, ComparisonStatus, summarize_comparison
from inspection.quality import DataQualitySummary


class ReportType:
    """Constants for report types."""

    QUALITY = "QUALITY"
    DIFF = "DIFF"


def generate_quality_report(
    summary: DataQualitySummary,
    row_count: int,
    columns: Sequence[str],
    source: str | None = None,
) -> dict[str, Any]:
    """
    Generate a data quality report

    Args:
        summary: Result of analyze_data_quality
        row_count: Number of rows analyzed
        columns: Columns the analysis covered
        source: Optional label of the analyzed input (file or table name)

    Returns:
        Dictionary containing:
        - report_type: QUALITY
        - status: PASS, ISSUES_FOUND, or NO_DATA
        - source, row_count, columns
        - results: summary.to_dict()
        - summary: Human-readable summary
        - recommendations: List of recommended actions
        - timestamp: Report generation timestamp
    """
    if row_count == 0:
        status = "NO_DATA"
    elif summary.has_issues:
        status = "ISSUES_FOUND"
    else:
        status = "PASS"

    duplicate_rows = len(summary.duplicate_index_set)
    name_rows = len(summary.name_duplicate_index_set)
    text = (
        f"{row_count} row(s) across {len(columns)} column(s): "
        f"{len(summary.duplicate_groups)} duplicate group(s) covering {duplicate_rows} row(s), "
        f"{len(summary.redundant_columns)} redundant column(s), "
        f"{len(summary.name_duplicate_groups)} identity duplicate group(s) covering {name_rows} row(s)"
    )

    recommendations = []
    if summary.duplicate_groups:
        recommendations.append(
            f"Review {duplicate_rows} fully duplicated row(s); consider a unique constraint"
        )
    if summary.redundant_columns and row_count > 1:
        recommendations.append(
            f"Hide constant columns to reduce noise: {', '.join(summary.redundant_columns)}"
        )
    for group in summary.name_duplicate_groups:
        if len(group.identifiers) > 1:
            ids = ", ".join(group.identifiers)
            target = f"{len(group.identifiers)} different records (IDs: {ids})"
        else:
            target = f"{len(group.indices)} rows"
        recommendations.append(
            f"'{group.display_value}' in column {group.column} refers to {target}; "
            f"check for duplicated reference data"
        )

    return {
        "report_type": ReportType.QUALITY,
        "status": status,
        "source": source,
        "row_count": row_count,
        "columns": list(columns),
        "results": summary.to_dict(),
        "summary": text,
        "recommendations": recommendations,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def generate_diff_report(
    results: Mapping[int, ComparisonResult],
    columns: Sequence[str],
    left_source: str | None = None,
    right_source: str | None = None,
    include_same: bool = False,
) -> dict[str, Any]:
    """
    Generate a table diff report

    Args:
        results: Result of diff_tables
        columns: Columns that were compared
        left_source: Optional label of the left input
        right_source: Optional label of the right input
        include_same: Also list rows with status ``same``

    Returns:
        Dictionary containing report_type DIFF, status (MATCH, MISMATCH or
        NO_DATA), counts, per-row entries and a human-readable summary
    """
    counts = summarize_comparison(results)

    if counts.total == 0:
        status = "NO_DATA"
    elif counts.identical:
        status = "MATCH"
    else:
        status = "MISMATCH"

    rows = []
    for index in sorted(results):
        result = results[index]
        if result.status is ComparisonStatus.SAME and not include_same:
            continue
        rows.append({"index": index, **result.to_dict()})

    text = (
        f"{counts.total} row position(s) compared on {len(columns)} column(s): "
        f"{counts.same} same, {counts.different} different, "
        f"{counts.left_only} left-only, {counts.right_only} right-only"
    )

    return {
        "report_type": ReportType.DIFF,
        "status": status,
        "left_source": left_source,
        "right_source": right_source,
        "columns": list(columns),
        "counts": counts.to_dict(),
        "rows": rows,
        "summary": text,
        "timestamp": datetime.now(UTC).isoformat(),
    }
