"""
Cell presentation helpers.

Renders cell values as text for tables and reports, and turns image
payloads stored in binary columns into data URIs.
"""

import base64
import json
from collections.abc import Sequence
from datetime import date, datetime, time
from typing import Any

from inspection.values import payload_bytes

UNDISPLAYABLE = "[Unable to display]"

# (magic bytes, MIME type)
IMAGE_SIGNATURES = (
    (b"\x89PNG", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF8", "image/gif"),
)


def detect_image_type(data: bytes | Sequence[int]) -> str | None:
    """
    Detect an image MIME type from leading magic bytes.

    Args:
        data: Raw bytes or a list of byte values

    Returns:
        "image/png", "image/jpeg", "image/gif", or None when unrecognized
        or shorter than four bytes
    """
    if len(data) < 4:
        return None
    try:
        head = bytes(data[:4])
    except (TypeError, ValueError):
        return None
    for magic, mime_type in IMAGE_SIGNATURES:
        if head.startswith(magic):
            return mime_type
    return None


def to_data_uri(value: Any) -> str | None:
    """
    Encode an image payload as ``data:<mime>;base64,<payload>``.

    Returns None for non-binary values, empty payloads and binaries that
    are not a recognized image.
    """
    data = payload_bytes(value)
    if not data:
        return None
    mime_type = detect_image_type(data)
    if mime_type is None:
        return None
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def _format_datetime(value: date) -> str:
    if not isinstance(value, datetime):
        return value.strftime("%d/%m/%Y")
    if value.time() == time(0, 0):
        return value.strftime("%d/%m/%Y")
    return value.strftime("%d/%m/%Y %H:%M:%S")


def format_for_display(value: Any) -> str:
    """
    Render a cell value as text. Never raises.

    - None: empty string
    - binary payloads: ``[Image PNG - 120 bytes]`` or ``[Binary Data - 16 bytes]``
    - booleans: ``true`` or ``false``
    - dates: ``dd/mm/yyyy``, with ``HH:MM:SS`` when not midnight
    - mappings and lists: JSON, or a placeholder if not serializable
    - anything else: ``str(value)``
    """
    if value is None:
        return ""

    data = payload_bytes(value)
    if data is not None:
        mime_type = detect_image_type(data)
        if mime_type:
            return f"[Image {mime_type.split('/')[1].upper()} - {len(data)} bytes]"
        return f"[Binary Data - {len(data)} bytes]"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, date):
        return _format_datetime(value)

    try:
        if isinstance(value, (dict, list, tuple)):
            return json.dumps(value, ensure_ascii=False)
        return str(value)
    except Exception:
        # Covers unserializable members, circular references and broken __str__
        return UNDISPLAYABLE
