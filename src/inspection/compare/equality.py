"""
Deep equality over cell values.

``deep_equal`` checks structural identity of already-canonical values.
``deep_equal_display_aware`` runs the same recursion but normalizes string
leaves first, so reference strings fetched through different paths
("Alice\\n(ID: 42)" vs "ALICE") compare equal.
"""

from collections.abc import Callable, Mapping
from typing import Any

from inspection.values import ValueKind, classify, normalize_display, payload_bytes


def _identity(value: Any) -> Any:
    return value


def _values_equal(left: Any, right: Any, leaf: Callable[[Any], Any]) -> bool:
    left = leaf(left)
    right = leaf(right)

    left_kind = classify(left)
    right_kind = classify(right)

    if left_kind is ValueKind.NULL or right_kind is ValueKind.NULL:
        return left_kind is right_kind

    if left_kind is not right_kind:
        return False

    if left_kind is ValueKind.NUMBER:
        # NaN compares equal to NaN so equality stays reflexive
        return left == right or (left != left and right != right)

    if left_kind in (ValueKind.BOOLEAN, ValueKind.TEXT):
        return left == right

    if left_kind is ValueKind.LIST:
        if len(left) != len(right):
            return False
        return all(_values_equal(a, b, leaf) for a, b in zip(left, right))

    if left_kind is ValueKind.BINARY:
        left_bytes = payload_bytes(left)
        right_bytes = payload_bytes(right)
        if left_bytes is None or right_bytes is None:
            # Out-of-range byte values; fall back to the raw mappings
            return left == right
        return left_bytes == right_bytes

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(_values_equal(left[key], right[key], leaf) for key in left)

    return left is right or left == right


def deep_equal(left: Any, right: Any) -> bool:
    """
    Structural equality of two cell values.

    Lists compare element-wise in order, mappings by key set and values,
    binary payloads byte-for-byte. Values of different kinds are never
    equal (``True`` is not ``1``).
    """
    return _values_equal(left, right, _identity)


def deep_equal_display_aware(left: Any, right: Any) -> bool:
    """
    Equality that ignores case, surrounding whitespace and ``(ID: ...)``
    annotations on every string leaf. Blank strings equal None.
    """
    return _values_equal(left, right, normalize_display)
