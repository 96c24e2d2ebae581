"""Tests for stream line reading."""

import io
from unittest.mock import MagicMock

import pytest

from prefmap.exceptions import PreferencesDecodeError
from prefmap.utils.lines import read_lines


class TestReadLines:
    """Tests for read_lines()."""

    def test_bytes(self):
        assert read_lines(io.BytesIO(b"a=1\nb=2\n")) == ["a=1", "b=2"]

    def test_no_trailing_newline(self):
        assert read_lines(io.BytesIO(b"a=1\nb=2")) == ["a=1", "b=2"]

    def test_keeps_blank_lines(self):
        assert read_lines(io.BytesIO(b"a\n\nb\n")) == ["a", "", "b"]

    def test_mixed_line_endings(self):
        assert read_lines(io.BytesIO(b"a\r\nb\rc\n")) == ["a", "b", "c"]

    def test_form_feed_is_not_a_line_break(self):
        assert read_lines(io.BytesIO(b"a=x\x0cy\n")) == ["a=x\x0cy"]

    def test_empty_stream(self):
        assert read_lines(io.BytesIO(b"")) == []

    def test_text_stream(self):
        assert read_lines(io.StringIO("a=1\n")) == ["a=1"]

    def test_unicode(self):
        data = "name=Café\n".encode("utf-8")
        assert read_lines(io.BytesIO(data)) == ["name=Café"]

    def test_bom_removed(self):
        assert read_lines(io.BytesIO(b"\xef\xbb\xbfa=1")) == ["a=1"]

    def test_invalid_utf8(self):
        with pytest.raises(PreferencesDecodeError, match="UTF-8"):
            read_lines(io.BytesIO(b"\xff"))

    def test_os_error_propagates(self):
        stream = MagicMock()
        stream.read.side_effect = OSError("read failed")
        with pytest.raises(OSError, match="read failed"):
            read_lines(stream)
