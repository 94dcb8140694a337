"""
Command-line argument parser configuration.

Defaults for output format, name columns and logging come from
``InspectionSettings`` so that environment variables apply unless a flag
overrides them.
"""

import argparse

from inspection.config import OUTPUT_FORMATS, InspectionSettings


def _add_output_arguments(parser: argparse.ArgumentParser, settings: InspectionSettings) -> None:
    parser.add_argument(
        '--columns',
        help='Comma-separated list of columns (default: every column, in first-seen order)'
    )
    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default=settings.output_format,
        help=f'Output format (default: {settings.output_format})'
    )
    parser.add_argument(
        '--output',
        help='Output file path (default: stdout)'
    )


def create_parser(settings: InspectionSettings | None = None) -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Args:
        settings: Defaults to apply (default: InspectionSettings.from_env())

    Returns:
        Configured ArgumentParser instance
    """
    if settings is None:
        settings = InspectionSettings.from_env()

    parser = argparse.ArgumentParser(
        prog='table-inspect',
        description="Data quality analysis and positional diffing of fetched table rows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input files hold a JSON list of row objects, or an object of the form
{"columns": [...], "rows": [...]}.

Examples:
  # Find duplicate rows, constant columns and duplicated references
  table-inspect analyze --input customers.json --name-columns Oid,Owner

  # Diff two exports of the same query, only on selected columns
  table-inspect diff --left prod.json --right staging.json --columns Name,Email

  # Machine-readable output
  table-inspect diff --left a.json --right b.json --format json --output diff.json
        """
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=settings.log_level,
        help=f'Logging level (default: {settings.log_level})'
    )
    parser.add_argument(
        '--log-json',
        action='store_true',
        default=settings.log_json,
        help='Emit JSON log records'
    )
    parser.add_argument(
        '--log-file',
        default=settings.log_file,
        help='Also write logs to this file, rotated at 10MB (default: none)'
    )
    parser.add_argument(
        '--otlp-endpoint',
        default=settings.otlp_endpoint,
        help='OTLP collector endpoint for traces (default: tracing disabled)'
    )
    parser.add_argument(
        '--trace-console',
        action='store_true',
        help='Print spans to the console'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # ========== Analyze command ==========
    analyze_parser = subparsers.add_parser(
        'analyze',
        help='Find duplicate rows, redundant columns and identity duplicates'
    )
    analyze_parser.add_argument(
        '--input',
        required=True,
        help='JSON file with the rows to analyze'
    )
    analyze_parser.add_argument(
        '--name-columns',
        default=','.join(settings.name_columns),
        help=f"Comma-separated reference columns (default: {','.join(settings.name_columns) or 'none'})"
    )
    _add_output_arguments(analyze_parser, settings)

    # ========== Diff command ==========
    diff_parser = subparsers.add_parser('diff', help='Compare two row sets position by position')
    diff_parser.add_argument(
        '--left',
        required=True,
        help='JSON file with the left rows'
    )
    diff_parser.add_argument(
        '--right',
        required=True,
        help='JSON file with the right rows'
    )
    diff_parser.add_argument(
        '--include-same',
        action='store_true',
        help='List identical rows in the report as well'
    )
    _add_output_arguments(diff_parser, settings)

    return parser
