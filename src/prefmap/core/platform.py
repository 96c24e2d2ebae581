"""Operating system family detection.

Override resolution takes the platform as a parameter; this module
supplies the default when the caller does not pass one.

Usage:
    platform = current_platform()
    if platform is Platform.MACOS:
        print("keys ending in .macos win")
"""

import logging
import platform as _platform

from ..constants import SYSTEM_NAMES, Platform
from ..exceptions import PlatformError

logger = logging.getLogger(__name__)


def current_platform() -> Platform:
    """Detect the running operating system family.

    Returns:
        Platform for Linux, Windows or macOS, Platform.OTHER otherwise
    """
    system = _platform.system()
    detected = SYSTEM_NAMES.get(system, Platform.OTHER)
    logger.debug(f"Detected platform {detected.value} (system={system!r})")
    return detected


def parse_platform(name: str | Platform) -> Platform:
    """Convert a platform name to a Platform.

    Args:
        name: One of "linux", "windows", "macos", "other" (any case)

    Returns:
        Matching Platform

    Raises:
        PlatformError: If the name is not a known platform

    Example:
        >>> parse_platform("MacOS")
        <Platform.MACOS: 'macos'>
    """
    if isinstance(name, Platform):
        return name
    try:
        return Platform(name.strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in Platform)
        raise PlatformError(f"Unknown platform '{name}' (expected one of: {choices})")
