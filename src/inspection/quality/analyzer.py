"""
Duplicate and redundancy analysis for a single result set.

Finds:
- Duplicate rows (identical signature across all displayed columns)
- Redundant columns (one distinct value, or none, across the result set)
- Identity duplicates (distinct rows whose reference column names the
  same entity once the ``(ID: ...)`` annotation is removed)

Group order follows the first occurrence of each key, so the output is
stable for a fixed input order.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from prometheus_client import Counter, Histogram

from inspection.values import extract_display_name, extract_identifier, signature_text
from utils.metrics import get_or_create_metric
from utils.tracing import trace_operation

logger = logging.getLogger(__name__)

DEFAULT_NAME_COLUMNS = ("Oid",)
SIGNATURE_SEPARATOR = "|"
SAMPLE_COLUMN_COUNT = 3
DISPLAY_NAME_FIELD = "DisplayName"


ANALYSES_TOTAL = get_or_create_metric(
    lambda: Counter(
        "inspection_analyses_total",
        "Data quality analyses performed",
    ),
    "inspection_analyses",
)

DUPLICATE_GROUPS_FOUND = get_or_create_metric(
    lambda: Counter(
        "inspection_duplicate_groups_total",
        "Duplicate groups reported by data quality analysis",
        ["kind"],
    ),
    "inspection_duplicate_groups",
)

ANALYSIS_TIME = get_or_create_metric(
    lambda: Histogram(
        "inspection_analysis_seconds",
        "Time to analyze one result set",
        buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    ),
    "inspection_analysis_seconds",
)


@dataclass(frozen=True)
class DuplicateGroup:
    """Row indices sharing one grouping key (always two or more)."""

    signature: str
    indices: list[int]
    sample_row: dict[str, Any]
    column: str | None = None
    display_value: str | None = None
    # Distinct "(ID: ...)" tokens of the members, in first-seen order
    identifiers: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result = {
            "signature": self.signature,
            "indices": list(self.indices),
            "sample_row": dict(self.sample_row),
        }
        if self.column is not None:
            result["column"] = self.column
        if self.display_value is not None:
            result["display_value"] = self.display_value
        if self.identifiers:
            result["identifiers"] = list(self.identifiers)
        return result


@dataclass
class DataQualitySummary:
    """Result of ``analyze_data_quality``."""

    duplicate_groups: list[DuplicateGroup] = field(default_factory=list)
    duplicate_index_set: set[int] = field(default_factory=set)
    redundant_columns: list[str] = field(default_factory=list)
    name_duplicate_groups: list[DuplicateGroup] = field(default_factory=list)
    name_duplicate_index_set: set[int] = field(default_factory=set)

    @property
    def has_issues(self) -> bool:
        return bool(self.duplicate_groups or self.redundant_columns or self.name_duplicate_groups)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization (index sets as sorted lists)."""
        return {
            "duplicate_groups": [group.to_dict() for group in self.duplicate_groups],
            "duplicate_indices": sorted(self.duplicate_index_set),
            "redundant_columns": list(self.redundant_columns),
            "name_duplicate_groups": [group.to_dict() for group in self.name_duplicate_groups],
            "name_duplicate_indices": sorted(self.name_duplicate_index_set),
        }


def build_signature(row: Mapping[str, Any], columns: Sequence[str]) -> str:
    """
    Build the duplicate-grouping key of a row.

    Values are joined unescaped, so a value containing ``|`` can make two
    different rows share a signature.
    """
    return SIGNATURE_SEPARATOR.join(signature_text(row.get(column)) for column in columns)


def build_sample_row(row: Mapping[str, Any], columns: Sequence[str]) -> dict[str, Any]:
    return {column: row.get(column) for column in columns[:SAMPLE_COLUMN_COUNT]}


def find_duplicate_rows(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
) -> tuple[list[DuplicateGroup], set[int]]:
    """
    Group rows whose signatures over ``columns`` are identical.

    Returns:
        Tuple of (groups with two or more members, union of their indices)
    """
    groups: dict[str, list[int]] = {}
    for index, row in enumerate(rows):
        groups.setdefault(build_signature(row, columns), []).append(index)

    duplicate_groups = []
    duplicate_indices: set[int] = set()
    for signature, indices in groups.items():
        if len(indices) < 2:
            continue
        duplicate_groups.append(
            DuplicateGroup(
                signature=signature,
                indices=indices,
                sample_row=build_sample_row(rows[indices[0]], columns),
            )
        )
        duplicate_indices.update(indices)

    return duplicate_groups, duplicate_indices


def find_redundant_columns(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
) -> list[str]:
    """
    Columns holding at most one distinct normalized value.

    With zero or one row every column is redundant.
    """
    redundant = []
    for column in columns:
        distinct = {signature_text(row.get(column)) for row in rows}
        if len(distinct) <= 1:
            redundant.append(column)
    return redundant


def find_identity_duplicates(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    name_columns: Sequence[str],
) -> tuple[list[DuplicateGroup], set[int]]:
    """
    Group rows whose reference columns resolve to the same display name.

    Names are compared case-insensitively per column; rows with an empty
    name are skipped. Each group keeps the display value of its first
    member as written, and the distinct identifier tokens of its members
    so that a name shared by several records stands out.

    Returns:
        Tuple of (groups with two or more members, union of their indices)
    """
    groups: dict[tuple[str, str], dict[str, Any]] = {}

    for index, row in enumerate(rows):
        for column in name_columns:
            value = row.get(column)
            display_name = extract_display_name(value)
            if not display_name:
                continue
            key = (column, display_name.lower())
            group = groups.get(key)
            if group is None:
                group = groups[key] = {
                    "indices": [index],
                    "identifiers": {},
                    "display_value": display_name,
                    "sample_row": {
                        DISPLAY_NAME_FIELD: display_name,
                        **build_sample_row(row, columns),
                    },
                }
            else:
                group["indices"].append(index)

            identifier = extract_identifier(value)
            if isinstance(value, str) and identifier != value:
                group["identifiers"].setdefault(identifier, None)

    name_groups = []
    name_indices: set[int] = set()
    for (column, normalized), group in groups.items():
        if len(group["indices"]) < 2:
            continue
        name_groups.append(
            DuplicateGroup(
                signature=f"{column}:{normalized}",
                indices=group["indices"],
                sample_row=group["sample_row"],
                column=column,
                display_value=group["display_value"],
                identifiers=list(group["identifiers"]),
            )
        )
        name_indices.update(group["indices"])

    return name_groups, name_indices


def analyze_data_quality(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    name_columns: Sequence[str] | None = None,
) -> DataQualitySummary:
    """
    Run duplicate, redundancy and identity-duplicate analysis on one result set.

    Args:
        rows: Rows of the result set, in display order
        columns: Columns to build signatures over and check for redundancy
        name_columns: Reference columns checked for identity duplicates
            (default: ``["Oid"]``); pass an empty list to skip the check

    Returns:
        DataQualitySummary; empty inputs yield empty (but valid) results
    """
    if name_columns is None:
        name_columns = DEFAULT_NAME_COLUMNS

    rows = list(rows or ())
    columns = list(columns or ())
    name_columns = list(name_columns)

    with trace_operation(
        "analyze_data_quality",
        row_count=len(rows),
        column_count=len(columns),
    ) as span:
        with ANALYSIS_TIME.time():
            duplicate_groups, duplicate_indices = find_duplicate_rows(rows, columns)
            redundant_columns = find_redundant_columns(rows, columns)
            name_groups, name_indices = find_identity_duplicates(rows, columns, name_columns)

        span.set_attribute("duplicate_groups", len(duplicate_groups))
        span.set_attribute("name_duplicate_groups", len(name_groups))

    ANALYSES_TOTAL.inc()
    DUPLICATE_GROUPS_FOUND.labels(kind="row").inc(len(duplicate_groups))
    DUPLICATE_GROUPS_FOUND.labels(kind="identity").inc(len(name_groups))

    logger.debug(
        f"Data quality analysis: {len(rows)} rows, {len(duplicate_groups)} duplicate group(s), "
        f"{len(redundant_columns)} redundant column(s), {len(name_groups)} identity group(s)"
    )

    return DataQualitySummary(
        duplicate_groups=duplicate_groups,
        duplicate_index_set=duplicate_indices,
        redundant_columns=redundant_columns,
        name_duplicate_groups=name_groups,
        name_duplicate_index_set=name_indices,
    )
