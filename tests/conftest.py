"""Pytest configuration and fixtures."""

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from prefmap.core.store import PreferencesMap

SAMPLE_PREFS = """\
# Board definitions
alpha = Alpha
alpha.some.keys = v1
alpha.other.keys = v2

beta = Beta
beta.some.keys = v3
tool.cmd = avrdude
tool.cmd.linux = avrdude-linux
tool.cmd.windows = avrdude.exe
tool.cmd.macos = avrdude-mac
"""


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Keep the CLI config out of the real home directory."""
    config_path = tmp_path / "config" / "config.toml"
    with patch("prefmap.utils.config.get_config_dir", return_value=config_path.parent):
        yield config_path


@pytest.fixture
def sample_file(tmp_path) -> Path:
    """Write the sample preferences to a file."""
    path = tmp_path / "boards.txt"
    path.write_text(SAMPLE_PREFS, encoding="utf-8")
    return path


@pytest.fixture
def nested_prefs() -> PreferencesMap:
    """Map with two first-level groups and two top-level keys."""
    return PreferencesMap(
        {
            "alpha": "Alpha",
            "alpha.some.keys": "v1",
            "alpha.other.keys": "v2",
            "beta": "Beta",
            "beta.some.keys": "v3",
        }
    )


@pytest.fixture
def make_stream():
    """Build UTF-8 byte streams from text."""

    def _make(text: str) -> io.BytesIO:
        return io.BytesIO(text.encode("utf-8"))

    return _make
