"""Application-wide constants.

Centralizes format markers and platform names so the parser, CLI and
config layer agree on them.
"""

from enum import Enum
from typing import Final

# =============================================================================
# VERSION AND METADATA
# =============================================================================

APP_NAME: Final[str] = "prefmap"

# =============================================================================
# TEXT FORMAT
# =============================================================================

COMMENT_CHAR: Final[str] = "#"
ASSIGNMENT_CHAR: Final[str] = "="
KEY_SEPARATOR: Final[str] = "."

# Rendering
RENDER_OPEN: Final[str] = "{"
RENDER_CLOSE: Final[str] = "}"
RENDER_ASSIGNMENT: Final[str] = " = "

# Trimmed from both ends of keys and values: every character up to and
# including the space, control characters too. Unicode spaces such as
# U+00A0 are kept.
TRIM_CHARS: Final[str] = "".join(map(chr, range(0x21)))

# Byte streams are decoded with this codec (a leading BOM is dropped)
DEFAULT_ENCODING: Final[str] = "utf-8-sig"

# =============================================================================
# PLATFORMS
# =============================================================================


class Platform(str, Enum):
    """Operating system families that can carry key overrides."""

    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"
    OTHER = "other"  # no override suffix

    @property
    def suffix(self) -> str | None:
        """Key suffix selecting this platform, e.g. ``.linux``."""
        if self is Platform.OTHER:
            return None
        return KEY_SEPARATOR + self.value


# platform.system() -> Platform
SYSTEM_NAMES: Final[dict[str, Platform]] = {
    "Linux": Platform.LINUX,
    "Windows": Platform.WINDOWS,
    "Darwin": Platform.MACOS,
}

# =============================================================================
# CLI DEFAULTS
# =============================================================================

DEFAULT_INDENT: Final[str] = "    "

# =============================================================================
# ERROR CODES
# =============================================================================


class ExitCode(int, Enum):
    """CLI exit codes."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_INPUT = 3
    KEYBOARD_INTERRUPT = 130
