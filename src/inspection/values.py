"""
Cell value classification and normalization.

Rows arrive from the query layer as mappings of column name to arbitrary
values. This module classifies those values into a small tagged variant
(``ValueKind``) and provides the two normalizations the rest of the
package builds on:

- signature normalization (``signature_text``): a string form used as a
  grouping key for duplicate detection
- display normalization (``normalize_display``): strips the
  ``(ID: ...)`` annotation that reference columns carry and case-folds,
  so that "Alice\\n(ID: 42)" and "ALICE" compare equal

The canonical binary shape is ``{"kind": "Buffer", "bytes": [137, 80, ...]}``.
The JSON form of a Node ``Buffer`` (``{"type": "Buffer", "data": [...]}``)
and native ``bytes`` values are accepted as the same payload.
"""

import json
import re
from collections.abc import Mapping
from enum import Enum
from numbers import Number
from typing import Any

NULL_SENTINEL = "∅"

BUFFER_TAG = "Buffer"
# Accepted key spellings of the canonical binary wire shape: (tag key, bytes key)
BINARY_SHAPES = (("type", "data"), ("kind", "bytes"))

# "Name\n(ID: 42)": everything from the newline on is dropped
EMBEDDED_ID_PATTERN = re.compile(r"\n\(ID:\s*[^)]+\)")
# "Name (ID: 42)": only the trailing annotation is dropped
TRAILING_ID_PATTERN = re.compile(r"\(ID:\s*[^)]+\)\Z")
IDENTIFIER_PATTERN = re.compile(r"\(ID:\s*([^)]+)\)")


class ValueKind(str, Enum):
    """Classification of a cell value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    BINARY = "binary"
    OBJECT = "object"
    LIST = "list"


def is_binary_payload(value: Any) -> bool:
    """
    Check whether ``value`` is a binary payload.

    A mapping qualifies only when its key set is exactly one of the
    canonical shapes; a payload with extra keys is a generic object.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return True
    if not isinstance(value, Mapping) or len(value) != 2:
        return False
    for tag_key, bytes_key in BINARY_SHAPES:
        if value.keys() == {tag_key, bytes_key}:
            return value[tag_key] == BUFFER_TAG and isinstance(value[bytes_key], (list, tuple))
    return False


def payload_bytes(value: Any) -> bytes | None:
    """
    Extract the raw bytes of a binary payload.

    Returns:
        The payload bytes, or None if ``value`` is not a binary payload or
        its byte list holds values outside 0-255
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if not is_binary_payload(value):
        return None
    for tag_key, bytes_key in BINARY_SHAPES:
        if tag_key in value:
            try:
                return bytes(value[bytes_key])
            except (TypeError, ValueError):
                return None
    return None


def classify(value: Any) -> ValueKind:
    """Return the ``ValueKind`` of a cell value."""
    if value is None:
        return ValueKind.NULL
    # bool is an int subclass, so it must be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if is_binary_payload(value):
        return ValueKind.BINARY
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    return ValueKind.OBJECT


def strip_identity(text: str) -> str:
    """
    Remove an ``(ID: ...)`` annotation from a display string.

    The embedded form (preceded by a newline) is tried first and cuts the
    string at the first match. Otherwise a trailing annotation at the very
    end is stripped. If stripping leaves an empty string, the original
    string is returned unchanged. The result is not trimmed.
    """
    match = EMBEDDED_ID_PATTERN.search(text)
    if match is None:
        match = TRAILING_ID_PATTERN.search(text)
    if match is None:
        return text

    stripped = text[:match.start()]
    if not stripped:
        return text
    return stripped


def extract_display_name(value: Any) -> str:
    """
    Recover the human-readable name from a reference cell.

    Non-string values are stringified; None yields an empty string.

    >>> extract_display_name("Bob\\n(ID: A1)")
    'Bob'
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        return str(value)
    return strip_identity(value).strip()


def extract_identifier(value: Any) -> Any:
    """
    Return the identifier token of an ``(ID: <token>)`` annotation.

    Values without an annotation (and non-strings) are returned unchanged.

    >>> extract_identifier("Bob (ID: 7f3a)")
    '7f3a'
    """
    if not isinstance(value, str):
        return value
    match = IDENTIFIER_PATTERN.search(value)
    if match is None:
        return value
    return match.group(1).strip()


def normalize_display(value: Any) -> Any:
    """
    Display-aware leaf normalization.

    Strings lose their identity annotation, are trimmed and lower-cased;
    a string that ends up empty becomes None. Other values pass through.
    """
    if not isinstance(value, str):
        return value
    cleaned = strip_identity(value).strip()
    if not cleaned:
        return None
    return cleaned.lower()


def _stable_json(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(value)


def signature_text(value: Any) -> str:
    """
    Signature normalization of a single cell.

    None maps to a sentinel; strings are trimmed and lower-cased (an empty
    string stays distinct from None); numbers and booleans are stringified
    verbatim; binary payloads serialize as their canonical byte list; other
    objects serialize to sorted-key JSON with a ``str()`` fallback.
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return NULL_SENTINEL
    if kind is ValueKind.TEXT:
        return value.strip().lower()
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return str(value)
    if kind is ValueKind.BINARY:
        data = payload_bytes(value)
        if data is None:
            return _stable_json(value)
        return _stable_json({"type": BUFFER_TAG, "data": list(data)})
    return _stable_json(value)
