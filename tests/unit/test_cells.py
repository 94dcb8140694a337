"""
Unit tests for cell presentation helpers.
"""

import base64
from datetime import date, datetime

from inspection.cells import UNDISPLAYABLE, detect_image_type, format_for_display, to_data_uri


class TestDetectImageType:
    """Test magic byte sniffing."""

    def test_png(self):
        assert detect_image_type([0x89, 0x50, 0x4E, 0x47, 0x0D]) == "image/png"

    def test_jpeg(self):
        assert detect_image_type([0xFF, 0xD8, 0xFF, 0xE0]) == "image/jpeg"

    def test_gif(self):
        assert detect_image_type(b"GIF89a") == "image/gif"

    def test_unknown(self):
        assert detect_image_type([1, 2, 3, 4]) is None

    def test_too_short(self):
        assert detect_image_type([0xFF, 0xD8, 0xFF]) is None
        assert detect_image_type([]) is None

    def test_invalid_byte_values(self):
        assert detect_image_type([999, 0, 0, 0]) is None


class TestToDataUri:
    """Test data URI encoding."""

    def test_png_payload(self, png_payload):
        uri = to_data_uri(png_payload)

        expected = base64.b64encode(bytes(png_payload["data"])).decode("ascii")
        assert uri == f"data:image/png;base64,{expected}"

    def test_kind_bytes_payload(self, png_payload):
        payload = {"kind": "Buffer", "bytes": png_payload["data"]}

        assert to_data_uri(payload) == to_data_uri(png_payload)
        assert to_data_uri({"kind": "Buffer", "bytes": [1, 2, 3, 4]}) is None

    def test_kind_bytes_with_extra_keys(self, png_payload):
        assert to_data_uri({"kind": "Buffer", "bytes": png_payload["data"], "x": 1}) is None

    def test_native_bytes(self):
        assert to_data_uri(b"\xff\xd8\xff\xe0").startswith("data:image/jpeg;base64,")

    def test_unrecognized_binary(self):
        assert to_data_uri({"type": "Buffer", "data": [1, 2, 3, 4]}) is None

    def test_empty_binary(self):
        assert to_data_uri({"type": "Buffer", "data": []}) is None

    def test_non_binary(self):
        assert to_data_uri("iVBORw0KGgo=") is None
        assert to_data_uri(None) is None


class TestFormatForDisplay:
    """Test text rendering of cells."""

    def test_none(self):
        assert format_for_display(None) == ""

    def test_image(self, png_payload):
        assert format_for_display(png_payload) == "[Image PNG - 12 bytes]"

    def test_kind_bytes_image(self, png_payload):
        payload = {"kind": "Buffer", "bytes": png_payload["data"]}

        assert format_for_display(payload) == "[Image PNG - 12 bytes]"
        assert format_for_display({"kind": "Buffer", "bytes": [0, 1]}) == "[Binary Data - 2 bytes]"

    def test_binary(self):
        assert format_for_display({"type": "Buffer", "data": [1, 2, 3]}) == "[Binary Data - 3 bytes]"
        assert format_for_display(b"\x00" * 16) == "[Binary Data - 16 bytes]"

    def test_payload_with_extra_keys_renders_as_json(self):
        value = {"type": "Buffer", "data": [1], "x": 1}

        assert format_for_display(value) == '{"type": "Buffer", "data": [1], "x": 1}'

    def test_objects_and_lists(self):
        assert format_for_display({"a": [1, "b"]}) == '{"a": [1, "b"]}'
        assert format_for_display([1, None]) == "[1, null]"

    def test_unserializable_object(self):
        assert format_for_display({"a": object()}) == UNDISPLAYABLE

    def test_circular_reference(self):
        value = []
        value.append(value)

        assert format_for_display(value) == UNDISPLAYABLE

    def test_broken_str(self):
        class Broken:
            def __str__(self):
                raise RuntimeError("boom")

        assert format_for_display(Broken()) == UNDISPLAYABLE

    def test_dates(self):
        assert format_for_display(date(2024, 3, 7)) == "07/03/2024"
        assert format_for_display(datetime(2024, 3, 7)) == "07/03/2024"
        assert format_for_display(datetime(2024, 3, 7, 14, 5, 9)) == "07/03/2024 14:05:09"

    def test_scalars(self):
        assert format_for_display(42) == "42"
        assert format_for_display("text") == "text"
        assert format_for_display(True) == "true"
        assert format_for_display(False) == "false"
