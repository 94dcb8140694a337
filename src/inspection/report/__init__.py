"""
Inspection report generation and formatting.

Builds report dictionaries from analysis and diff results and renders them
as console text, JSON or CSV.
"""

from .formatters import (
    export_report_csv,
    export_report_json,
    format_report_console,
    report_to_json,
    write_report_csv,
)
from .generator import ReportType, generate_diff_report, generate_quality_report

__all__ = [
    'ReportType',
    'generate_quality_report',
    'generate_diff_report',
    'report_to_json',
    'export_report_json',
    'export_report_csv',
    'write_report_csv',
    'format_report_console',
]
