"""
Value equality and positional row comparison.

This submodule provides:
- deep_equal / deep_equal_display_aware: recursive cell equality
- compare_rows / diff_tables: index-aligned comparison of two result sets
- summarize_comparison: per-status counts over a diff
"""

from .equality import deep_equal, deep_equal_display_aware
from .rows import (
    ComparisonResult,
    ComparisonStatus,
    ComparisonSummary,
    compare_rows,
    diff_tables,
    summarize_comparison,
)

__all__ = [
    'deep_equal',
    'deep_equal_display_aware',
    'ComparisonResult',
    'ComparisonStatus',
    'ComparisonSummary',
    'compare_rows',
    'diff_tables',
    'summarize_comparison',
]
