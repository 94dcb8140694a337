"""
CLI command implementations.

- analyze: data quality analysis of one row set
- diff: positional comparison of two row sets
"""

import argparse
import io
import json
import sys
from collections.abc import Mapping, Sequence
from typing import Any

from inspection.compare import diff_tables
from inspection.config import parse_column_list
from inspection.quality import analyze_data_quality
from inspection.report import (
    export_report_csv,
    export_report_json,
    format_report_console,
    generate_diff_report,
    generate_quality_report,
    report_to_json,
    write_report_csv,
)
from utils.logging import ContextLogger
from utils.tracing import trace_function

logger = ContextLogger(__name__)


class InputFileError(ValueError):
    """Raised when an input file does not hold a row set."""


def load_rows(path: str) -> tuple[list[dict[str, Any]], list[str] | None]:
    """
    Load a row set from a JSON file

    Args:
        path: File holding a list of row objects, or an object with
            ``rows`` and optional ``columns`` keys

    Returns:
        Tuple of (rows, declared columns or None)

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        InputFileError: If the JSON does not describe a row set
    """
    with open(path, encoding='utf-8') as f:
        payload = json.load(f)

    columns = None
    if isinstance(payload, Mapping):
        columns = payload.get("columns")
        payload = payload.get("rows")
        if columns is not None and (
            not isinstance(columns, list) or not all(isinstance(c, str) for c in columns)
        ):
            raise InputFileError(f"{path}: 'columns' must be a list of strings")

    if not isinstance(payload, list):
        raise InputFileError(f"{path}: expected a list of rows")
    for index, row in enumerate(payload):
        if not isinstance(row, Mapping):
            raise InputFileError(f"{path}: row {index} is not an object")

    return payload, columns


def resolve_columns(
    requested: str | None,
    declared: Sequence[list[str] | None],
    row_sets: Sequence[Sequence[Mapping[str, Any]]],
) -> list[str]:
    """
    Decide which columns to inspect

    Priority: ``--columns`` flag, then columns declared in the input files,
    then the union of row keys in first-seen order.
    """
    if requested:
        return parse_column_list(requested)

    seen: dict[str, None] = {}
    for columns in declared:
        for column in columns or ():
            seen.setdefault(column, None)
    if seen:
        return list(seen)

    for rows in row_sets:
        for row in rows:
            for column in row:
                seen.setdefault(column, None)
    return list(seen)


def emit_report(report: dict[str, Any], output_format: str, output_path: str | None) -> None:
    """
    Write a report in the requested format to a file or stdout
    """
    if output_path:
        if output_format == 'json':
            export_report_json(report, output_path)
        elif output_format == 'csv':
            export_report_csv(report, output_path)
        else:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(format_report_console(report))
                f.write("\n")
        logger.info("Report written", path=output_path, format=output_format)
        return

    if output_format == 'json':
        text = report_to_json(report)
    elif output_format == 'csv':
        buffer = io.StringIO()
        write_report_csv(report, buffer)
        text = buffer.getvalue().rstrip("\n")
    else:
        text = format_report_console(report)
    sys.stdout.write(text + "\n")


@trace_function(component="cli")
def cmd_analyze(args: argparse.Namespace) -> int:
    """
    Run data quality analysis on one input file

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit code
    """
    log = logger.bind(command="analyze", input=args.input)

    try:
        rows, declared = load_rows(args.input)
    except (OSError, json.JSONDecodeError, InputFileError) as e:
        log.error(f"Cannot load rows: {e}")
        return 1

    columns = resolve_columns(args.columns, [declared], [rows])
    name_columns = parse_column_list(args.name_columns)
    log.info(
        f"Analyzing {len(rows)} row(s)",
        column_count=len(columns),
        name_columns=",".join(name_columns),
    )

    summary = analyze_data_quality(rows, columns, name_columns)
    report = generate_quality_report(summary, len(rows), columns, source=args.input)
    log.info(report["summary"], status=report["status"])

    emit_report(report, args.format, args.output)
    return 0


@trace_function(component="cli")
def cmd_diff(args: argparse.Namespace) -> int:
    """
    Diff two input files position by position

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit code
    """
    log = logger.bind(command="diff", left=args.left, right=args.right)

    try:
        left_rows, left_columns = load_rows(args.left)
        right_rows, right_columns = load_rows(args.right)
    except (OSError, json.JSONDecodeError, InputFileError) as e:
        log.error(f"Cannot load rows: {e}")
        return 1

    columns = resolve_columns(
        args.columns,
        [left_columns, right_columns],
        [left_rows, right_rows],
    )
    log.info(
        f"Comparing {len(left_rows)} left row(s) with {len(right_rows)} right row(s)",
        column_count=len(columns),
    )

    results = diff_tables(left_rows, right_rows, columns)
    report = generate_diff_report(
        results,
        columns,
        left_source=args.left,
        right_source=args.right,
        include_same=args.include_same,
    )
    log.info(report["summary"], status=report["status"])

    emit_report(report, args.format, args.output)
    return 0
