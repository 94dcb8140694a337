"""
Positional row comparison between two result sets.

Row ``i`` on the left is always compared with row ``i`` on the right;
there is no key-based re-matching. Indices that exist on one side only are
reported as left-only / right-only.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from prometheus_client import Counter, Histogram

from utils.metrics import get_or_create_metric
from utils.tracing import trace_operation

from .equality import deep_equal_display_aware

logger = logging.getLogger(__name__)


ROW_COMPARISONS = get_or_create_metric(
    lambda: Counter(
        "inspection_row_comparisons_total",
        "Rows compared by the table differ",
        ["status"],
    ),
    "inspection_row_comparisons",
)

DIFF_TIME = get_or_create_metric(
    lambda: Histogram(
        "inspection_diff_seconds",
        "Time to diff two result sets",
        buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    ),
    "inspection_diff_seconds",
)


class ComparisonStatus(str, Enum):
    SAME = "same"
    DIFFERENT = "different"
    LEFT_ONLY = "left-only"
    RIGHT_ONLY = "right-only"


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing the rows at one index."""

    status: ComparisonStatus
    left_row: Mapping[str, Any] | None = None
    right_row: Mapping[str, Any] | None = None
    diff_columns: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization, omitting absent fields."""
        result: dict[str, Any] = {"status": self.status.value}
        if self.left_row is not None:
            result["left_row"] = dict(self.left_row)
        if self.right_row is not None:
            result["right_row"] = dict(self.right_row)
        if self.diff_columns:
            result["diff_columns"] = list(self.diff_columns)
        return result


@dataclass
class ComparisonSummary:
    """Per-status counts over a diff, plus the columns that ever differed."""

    total: int = 0
    same: int = 0
    different: int = 0
    left_only: int = 0
    right_only: int = 0
    diff_columns: list[str] = field(default_factory=list)

    @property
    def identical(self) -> bool:
        return self.total == self.same

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "same": self.same,
            "different": self.different,
            "left_only": self.left_only,
            "right_only": self.right_only,
            "diff_columns": list(self.diff_columns),
            "identical": self.identical,
        }


def compare_rows(
    left_row: Mapping[str, Any] | None,
    right_row: Mapping[str, Any] | None,
    columns_to_compare: Sequence[str],
) -> ComparisonResult:
    """
    Compare two rows column by column.

    A column missing from a row reads as None. When both rows are absent
    the result is ``same`` with no rows attached.

    Args:
        left_row: Row from the left result set, or None
        right_row: Row from the right result set, or None
        columns_to_compare: Columns to check, in report order

    Returns:
        ComparisonResult; ``diff_columns`` is set only for ``different``
    """
    if left_row is None and right_row is not None:
        return ComparisonResult(status=ComparisonStatus.RIGHT_ONLY, right_row=right_row)

    if left_row is not None and right_row is None:
        return ComparisonResult(status=ComparisonStatus.LEFT_ONLY, left_row=left_row)

    if left_row is None or right_row is None:
        return ComparisonResult(status=ComparisonStatus.SAME)

    diff_columns = [
        column
        for column in columns_to_compare
        if not deep_equal_display_aware(left_row.get(column), right_row.get(column))
    ]

    if diff_columns:
        return ComparisonResult(
            status=ComparisonStatus.DIFFERENT,
            left_row=left_row,
            right_row=right_row,
            diff_columns=diff_columns,
        )
    return ComparisonResult(
        status=ComparisonStatus.SAME,
        left_row=left_row,
        right_row=right_row,
    )


def diff_tables(
    left_rows: Sequence[Mapping[str, Any]],
    right_rows: Sequence[Mapping[str, Any]],
    columns_to_compare: Sequence[str],
) -> dict[int, ComparisonResult]:
    """
    Compare two result sets index by index.

    Args:
        left_rows: Rows of the left table, in display order
        right_rows: Rows of the right table, in display order
        columns_to_compare: Columns to check on rows present on both sides

    Returns:
        Mapping of row index to ComparisonResult for every index in
        ``range(max(len(left_rows), len(right_rows)))``
    """
    row_count = max(len(left_rows), len(right_rows))

    with trace_operation(
        "diff_tables",
        left_rows=len(left_rows),
        right_rows=len(right_rows),
        column_count=len(columns_to_compare),
    ) as span:
        with DIFF_TIME.time():
            results: dict[int, ComparisonResult] = {}
            for index in range(row_count):
                left_row = left_rows[index] if index < len(left_rows) else None
                right_row = right_rows[index] if index < len(right_rows) else None
                result = compare_rows(left_row, right_row, columns_to_compare)
                results[index] = result
                ROW_COMPARISONS.labels(status=result.status.value).inc()

        summary = summarize_comparison(results)
        span.set_attribute("rows_different", summary.different)

    logger.debug(
        f"Diffed {row_count} row(s): {summary.same} same, {summary.different} different, "
        f"{summary.left_only} left-only, {summary.right_only} right-only"
    )
    return results


def summarize_comparison(results: Mapping[int, ComparisonResult]) -> ComparisonSummary:
    """
    Count diff results per status.

    ``diff_columns`` lists every column that differed on at least one row,
    in first-seen order.
    """
    summary = ComparisonSummary(total=len(results))
    seen_columns: dict[str, None] = {}

    for index in sorted(results):
        result = results[index]
        if result.status is ComparisonStatus.SAME:
            summary.same += 1
        elif result.status is ComparisonStatus.DIFFERENT:
            summary.different += 1
            for column in result.diff_columns or ():
                seen_columns.setdefault(column, None)
        elif result.status is ComparisonStatus.LEFT_ONLY:
            summary.left_only += 1
        else:
            summary.right_only += 1

    summary.diff_columns = list(seen_columns)
    return summary
