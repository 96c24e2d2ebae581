"""Ordered preference map loaded from ``key=value`` text.

Keys use "." as a hierarchy separator. Keys ending in a platform suffix
(``.linux``, ``.windows``, ``.macos``) override their base key when the
file is loaded on that platform.

Given this file on Linux:

    # upload settings
    upload.tool = avrdude
    upload.tool.linux = avrdude-linux
    upload.speed = 115200
    name = Uno

the map holds ``upload.tool = avrdude-linux`` (the ``.linux`` entry is kept
as well) and can be navigated with:

    prefs.top_level_map()       -> {name: Uno}
    prefs.first_level_map()     -> {upload: {tool: ..., tool.linux: ..., speed: ...}}
    prefs.sub_tree("upload")    -> {tool: ..., tool.linux: ..., speed: ...}
"""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import IO

from ..constants import (
    ASSIGNMENT_CHAR,
    COMMENT_CHAR,
    KEY_SEPARATOR,
    RENDER_ASSIGNMENT,
    RENDER_CLOSE,
    RENDER_OPEN,
    TRIM_CHARS,
    Platform,
)
from ..utils.lines import read_lines
from .platform import current_platform

logger = logging.getLogger(__name__)


def parse_line(line: str) -> tuple[str, str] | None:
    """Parse one line of the text format.

    Args:
        line: A line without its terminator

    Returns:
        (key, value) trimmed of characters up to U+0020, or None for
        blank lines, comments and lines without "="
    """
    if not line or line[0] == COMMENT_CHAR:
        return None

    equals = line.find(ASSIGNMENT_CHAR)
    if equals == -1:
        return None

    return line[:equals].strip(TRIM_CHARS), line[equals + 1 :].strip(TRIM_CHARS)


def resolve_platform_overrides(
    entries: Mapping[str, str], platform: Platform
) -> dict[str, str]:
    """Copy platform-specific values onto their base keys.

    Pure version of PreferencesMap.resolve_overrides(): the input is not
    modified.

    Args:
        entries: Ordered key/value pairs
        platform: Platform whose suffix is applied

    Returns:
        New dict with every ``K.<platform>`` value also stored under ``K``

    Example:
        >>> resolve_platform_overrides({"a": "1", "a.linux": "2"}, Platform.LINUX)
        {'a': '2', 'a.linux': '2'}
    """
    resolved = dict(entries)
    _apply_overrides(resolved, platform)
    return resolved


def _apply_overrides(data: dict[str, str], platform: Platform) -> int:
    """Apply overrides to data in place, returning how many were applied."""
    suffix = platform.suffix
    if suffix is None:
        return 0

    applied = 0
    # Snapshot: data grows while we iterate
    for key in list(data):
        if not key.endswith(suffix):
            continue
        base = key[: key.rindex(KEY_SEPARATOR)]
        data[base] = data[key]
        applied += 1
    return applied


def _utf16_order(key: str) -> bytes:
    """Sort key comparing UTF-16 code units, so U+10000 sorts before U+FFFF."""
    return key.encode("utf-16-be", "surrogatepass")


class PreferencesMap:
    """Ordered string-to-string map with hierarchical views.

    Wraps a dict rather than subclassing it, so only the operations below
    are part of the contract. Every view returns a new, independent map.
    """

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._data: dict[str, str] = dict(entries.items()) if entries else {}

    @classmethod
    def from_stream(
        cls, stream: IO, platform: Platform | None = None
    ) -> "PreferencesMap":
        """Create a map and load a stream into it."""
        prefs = cls()
        prefs.load(stream, platform=platform)
        return prefs

    @classmethod
    def from_file(
        cls, path: str | Path, platform: Platform | None = None
    ) -> "PreferencesMap":
        """Create a map and load a file into it.

        Equivalent to:

            prefs = PreferencesMap()
            prefs.load_file(path)
        """
        prefs = cls()
        prefs.load_file(path, platform=platform)
        return prefs

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_file(self, path: str | Path, platform: Platform | None = None) -> None:
        """Parse a preferences file and add its entries.

        Args:
            path: File to read
            platform: Platform for override resolution (detected if None)

        Raises:
            OSError: If the file cannot be opened or read
        """
        path = Path(path)
        logger.debug(f"Loading preferences from {path}")
        with open(path, "rb") as f:
            self.load(f, platform=platform)

    def load(self, stream: IO, platform: Platform | None = None) -> None:
        """Parse a preferences stream and add its entries.

        Blank lines, lines starting with "#" and lines without "=" are
        skipped. Later duplicates overwrite earlier ones. Once every line
        is stored, platform overrides are resolved.

        Args:
            stream: Open binary or text stream
            platform: Platform for override resolution (detected if None)

        Raises:
            OSError: If reading the stream fails
            PreferencesDecodeError: If a binary stream is not valid UTF-8
        """
        lines = read_lines(stream)

        stored = 0
        for number, line in enumerate(lines, start=1):
            parsed = parse_line(line)
            if parsed is None:
                if line and line[0] != COMMENT_CHAR:
                    logger.debug(f"Skipping line {number}: no '{ASSIGNMENT_CHAR}'")
                continue
            key, value = parsed
            self._data[key] = value
            stored += 1

        if platform is None:
            platform = current_platform()
        applied = self.resolve_overrides(platform)

        logger.debug(
            f"Read {len(lines)} lines, stored {stored} entries, "
            f"applied {applied} {platform.value} overrides"
        )

    def resolve_overrides(self, platform: Platform) -> int:
        """Copy ``K.<platform>`` values onto ``K``.

        Suffixed keys are kept. Suffixes of other platforms are left alone.

        Args:
            platform: Platform whose suffix is applied

        Returns:
            Number of keys overridden
        """
        return _apply_overrides(self._data, platform)

    # ------------------------------------------------------------------
    # Structural views
    # ------------------------------------------------------------------

    def top_level_map(self) -> "PreferencesMap":
        """Return the entries whose key has no "." in it.

        Example:
            {alpha: A, alpha.x: 1, beta: B} -> {alpha: A, beta: B}
        """
        res = PreferencesMap()
        for key, value in self._data.items():
            if KEY_SEPARATOR in key:
                continue
            res._data[key] = value
        return res

    def first_level_map(self) -> dict[str, "PreferencesMap"]:
        """Group dotted keys by their first segment.

        Top level pairs are discarded. Groups appear in order of first
        appearance.

        Example:
            {alpha: A, alpha.some.keys: v1, alpha.other.keys: v2, beta.some.keys: v3}
            -> {alpha: {some.keys: v1, other.keys: v2}, beta: {some.keys: v3}}
        """
        res: dict[str, PreferencesMap] = {}
        for key, value in self._data.items():
            dot = key.find(KEY_SEPARATOR)
            if dot == -1:
                continue

            parent = key[:dot]
            child = key[dot + 1 :]

            if parent not in res:
                res[parent] = PreferencesMap()
            res[parent]._data[child] = value
        return res

    def sub_tree(self, parent: str) -> "PreferencesMap":
        """Return the entries below ``parent`` with the prefix removed.

        Args:
            parent: Key prefix, without the trailing "."

        Example:
            {alpha: A, alpha.some.keys: v1, beta.x: 3}.sub_tree("alpha")
            -> {some.keys: v1}
        """
        prefix = parent + KEY_SEPARATOR
        prefix_len = len(prefix)

        res = PreferencesMap()
        for key, value in self._data.items():
            if key.startswith(prefix):
                res._data[key[prefix_len:]] = value
        return res

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, indent: str = "") -> str:
        """Render entries sorted by key, one ``key = value`` per line.

        The opening brace is written but no closing brace; use
        render_block() for a balanced form.
        """
        res = indent + RENDER_OPEN + "\n"
        for key in sorted(self._data, key=_utf16_order):
            res += indent + key + RENDER_ASSIGNMENT + self._data[key] + "\n"
        return res

    def render_block(self, indent: str = "") -> str:
        """Like render(), with the closing brace line appended."""
        return self.render(indent) + indent + RENDER_CLOSE + "\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"PreferencesMap({self._data!r})"

    # ------------------------------------------------------------------
    # Mapping operations
    # ------------------------------------------------------------------

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._data.get(key, default)

    def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)

    def values(self) -> list[str]:
        return list(self._data.values())

    def items(self) -> list[tuple[str, str]]:
        return list(self._data.items())

    def to_dict(self) -> dict[str, str]:
        """Return a copy of the entries as a plain dict."""
        return dict(self._data)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __eq__(self, other: object) -> bool:
        # Order is part of a map's identity
        if not isinstance(other, PreferencesMap):
            return NotImplemented
        return list(self._data.items()) == list(other._data.items())
