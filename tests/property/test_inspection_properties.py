"""
Property-based tests for inspection logic using Hypothesis.

Tests invariants that should hold for all inputs:
- Deep equality is reflexive and symmetric
- Duplicate groups partition the duplicate index set
- Redundant column detection on degenerate row sets
- Positional diffs cover every row index
"""

import string

from hypothesis import given, settings, strategies as st

from inspection.compare import ComparisonStatus, deep_equal, deep_equal_display_aware, diff_tables
from inspection.quality import build_signature, find_duplicate_rows, find_redundant_columns

COLUMNS = ["a", "b", "c"]

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-1000, max_value=1000),
    st.floats(allow_nan=True, allow_infinity=False),
    st.text(max_size=10),
)

binary_payloads = st.binary(max_size=8).map(
    lambda raw: {"type": "Buffer", "data": list(raw)}
)

cell_values = st.recursive(
    st.one_of(scalars, binary_payloads),
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(alphabet=string.ascii_lowercase, max_size=5), children, max_size=4),
    ),
    max_leaves=12,
)

flat_cells = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=0, max_value=3),
    st.sampled_from(["x", "X", " x ", "y", ""]),
)

rows_strategy = st.lists(st.fixed_dictionaries({column: flat_cells for column in COLUMNS}), max_size=12)


# Property: deep equality is reflexive
@given(value=cell_values)
def test_deep_equal_reflexive(value):
    assert deep_equal(value, value)
    assert deep_equal_display_aware(value, value)


# Property: deep equality is symmetric
@given(left=cell_values, right=cell_values)
def test_deep_equal_symmetric(left, right):
    assert deep_equal(left, right) == deep_equal(right, left)
    assert deep_equal_display_aware(left, right) == deep_equal_display_aware(right, left)


# Property: display-aware equality ignores case and surrounding whitespace
@given(text=st.text(alphabet=string.ascii_letters + " ", max_size=20))
def test_display_aware_ignores_case_and_padding(text):
    assert deep_equal_display_aware(text, f"  {text.upper()} ")
    assert deep_equal_display_aware([text], [text.lower()])


# Property: duplicate groups partition the duplicate index set
@given(rows=rows_strategy)
@settings(max_examples=200)
def test_duplicate_groups_partition_indices(rows):
    groups, indices = find_duplicate_rows(rows, COLUMNS)

    union = set()
    for group in groups:
        assert len(group.indices) >= 2
        assert union.isdisjoint(group.indices)
        union.update(group.indices)
        assert {build_signature(rows[i], COLUMNS) for i in group.indices} == {group.signature}

    assert union == indices

    # Rows outside every group have a signature no other row shares
    signatures = [build_signature(row, COLUMNS) for row in rows]
    for index, signature in enumerate(signatures):
        if index not in indices:
            assert signatures.count(signature) == 1


# Property: with at most one row, every column is redundant
@given(rows=st.lists(st.fixed_dictionaries({column: flat_cells for column in COLUMNS}), max_size=1))
def test_single_row_columns_all_redundant(rows):
    assert find_redundant_columns(rows, COLUMNS) == COLUMNS


# Property: repeating one row makes every column redundant and one group of all rows
@given(
    row=st.fixed_dictionaries({column: flat_cells for column in COLUMNS}),
    copies=st.integers(min_value=2, max_value=6),
)
def test_repeated_row(row, copies):
    rows = [dict(row) for _ in range(copies)]

    groups, indices = find_duplicate_rows(rows, COLUMNS)

    assert find_redundant_columns(rows, COLUMNS) == COLUMNS
    assert len(groups) == 1
    assert groups[0].indices == list(range(copies))
    assert indices == set(range(copies))


# Property: diff results cover every index and respect side lengths
@given(left=rows_strategy, right=rows_strategy)
@settings(max_examples=200)
def test_diff_tables_covers_all_indices(left, right):
    results = diff_tables(left, right, COLUMNS)

    assert sorted(results) == list(range(max(len(left), len(right))))

    for index, result in results.items():
        if index >= len(right):
            assert result.status is ComparisonStatus.LEFT_ONLY
        elif index >= len(left):
            assert result.status is ComparisonStatus.RIGHT_ONLY
        elif result.status is ComparisonStatus.DIFFERENT:
            assert result.diff_columns
            assert set(result.diff_columns) <= set(COLUMNS)
        else:
            assert result.status is ComparisonStatus.SAME


# Property: a table diffed against itself is entirely the same
@given(rows=rows_strategy)
def test_diff_against_self(rows):
    results = diff_tables(rows, rows, COLUMNS)

    assert all(result.status is ComparisonStatus.SAME for result in results.values())
