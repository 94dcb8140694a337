"""
Data quality analysis for a single result set.

Duplicate rows, redundant columns and identity duplicates in reference
columns.
"""

from .analyzer import (
    DEFAULT_NAME_COLUMNS,
    DataQualitySummary,
    DuplicateGroup,
    analyze_data_quality,
    build_signature,
    find_duplicate_rows,
    find_identity_duplicates,
    find_redundant_columns,
)

__all__ = [
    'DEFAULT_NAME_COLUMNS',
    'DataQualitySummary',
    'DuplicateGroup',
    'analyze_data_quality',
    'build_signature',
    'find_duplicate_rows',
    'find_identity_duplicates',
    'find_redundant_columns',
]
