"""Core prefmap logic.

This module contains:
- PreferencesMap: ordered map with platform overrides and hierarchical views
- Platform detection
"""

from .platform import current_platform, parse_platform
from .store import PreferencesMap, parse_line, resolve_platform_overrides

__all__ = [
    "PreferencesMap",
    "parse_line",
    "resolve_platform_overrides",
    "current_platform",
    "parse_platform",
]
