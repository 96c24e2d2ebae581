"""Tests for application constants."""

from prefmap.constants import (
    APP_NAME,
    ASSIGNMENT_CHAR,
    COMMENT_CHAR,
    KEY_SEPARATOR,
    SYSTEM_NAMES,
    ExitCode,
    Platform,
)


class TestFormatConstants:
    """Tests for text format markers."""

    def test_markers(self):
        assert COMMENT_CHAR == "#"
        assert ASSIGNMENT_CHAR == "="
        assert KEY_SEPARATOR == "."

    def test_app_name(self):
        assert APP_NAME == "prefmap"


class TestPlatformEnum:
    """Tests for the Platform enum."""

    def test_values(self):
        assert [p.value for p in Platform] == ["linux", "windows", "macos", "other"]

    def test_system_names_cover_known_platforms(self):
        assert set(SYSTEM_NAMES.values()) == {
            Platform.LINUX,
            Platform.WINDOWS,
            Platform.MACOS,
        }


class TestExitCode:
    """Tests for CLI exit codes."""

    def test_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.FILE_NOT_FOUND == 2
        assert ExitCode.INVALID_INPUT == 3
        assert ExitCode.KEYBOARD_INTERRUPT == 130
