"""
Data quality analysis and row comparison for fetched table result sets

Components:
- values: cell classification and normalization
- compare: deep equality and positional table diffing
- quality: duplicate rows, redundant columns, identity duplicates
- cells: display formatting and image data URIs
- report: console/JSON/CSV reports
- cli: the table-inspect command

Usage:
    from inspection.quality import analyze_data_quality
    from inspection.compare import diff_tables
    from inspection.cells import format_for_display
"""

__version__ = "1.0.0"
__all__ = ["values", "compare", "quality", "cells", "report", "config", "cli"]
