"""Line reading for preference streams.

Accepts binary streams (decoded as UTF-8) and text streams.
"""

from typing import IO

from ..constants import DEFAULT_ENCODING
from ..exceptions import PreferencesDecodeError


def read_lines(stream: IO) -> list[str]:
    """Read every line of a stream, in order.

    Line terminators (``\\n``, ``\\r\\n``, ``\\r``) are removed. A final
    terminator does not produce an extra empty line.

    Args:
        stream: Open binary or text stream

    Returns:
        List of lines without terminators

    Raises:
        OSError: If reading the stream fails
        PreferencesDecodeError: If a binary stream is not valid UTF-8
    """
    data = stream.read()

    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode(DEFAULT_ENCODING)
        except UnicodeDecodeError as e:
            raise PreferencesDecodeError(f"Preferences are not valid UTF-8: {e}")

    return _split_lines(data)


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n``, ``\\r\\n`` and ``\\r`` only.

    str.splitlines() also breaks on form feeds and other separators,
    which are ordinary characters inside a value.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
