"""
Command-line interface for table inspection.

Available commands:
- analyze: Data quality analysis of one exported row set
- diff: Positional comparison of two exported row sets
"""

import sys

from inspection.config import InspectionSettings
from utils.logging import setup_logging
from utils.tracing import initialize_tracing, shutdown_tracing

from .commands import cmd_analyze, cmd_diff, emit_report, load_rows, resolve_columns
from .parser import create_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the table-inspect CLI"""
    try:
        settings = InspectionSettings.from_env()
    except ValueError as e:
        sys.stderr.write(f"table-inspect: {e}\n")
        return 2

    parser = create_parser(settings)
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file, json_format=args.log_json)

    tracing_enabled = bool(args.otlp_endpoint or args.trace_console)
    if tracing_enabled:
        initialize_tracing(otlp_endpoint=args.otlp_endpoint, console_export=args.trace_console)

    try:
        if args.command == 'analyze':
            return cmd_analyze(args)
        if args.command == 'diff':
            return cmd_diff(args)
        parser.print_help()
        return 1
    finally:
        if tracing_enabled:
            shutdown_tracing()


__all__ = [
    'main',
    'cmd_analyze',
    'cmd_diff',
    'create_parser',
    'emit_report',
    'load_rows',
    'resolve_columns',
]


if __name__ == '__main__':
    sys.exit(main())
