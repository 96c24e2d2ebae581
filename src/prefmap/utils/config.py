"""Configuration file management for the prefmap CLI.

Config is stored in TOML format at:
- macOS/Linux: ~/.config/prefmap/config.toml
- Windows: %APPDATA%\\prefmap\\config.toml

Usage:
    config = load_config()
    indent = get_value(config, "display.indent", "    ")
"""

import copy
import logging
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from ..constants import APP_NAME, DEFAULT_INDENT, KEY_SEPARATOR, Platform
from ..core.platform import current_platform, parse_platform
from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get platform-appropriate config directory."""
    if platform.system() == "Windows":
        base = Path.home() / "AppData" / "Roaming"
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """Get path to config file."""
    return get_config_dir() / "config.toml"


DEFAULT_CONFIG = {
    "display": {
        "indent": DEFAULT_INDENT,
    },
    "platform": {
        # Empty means detect the running platform
        "override": "",
    },
}


def load_config() -> dict:
    """Load configuration from file.

    Creates default config if file doesn't exist.

    Returns:
        Dict with configuration values

    Raises:
        ConfigError: If config file is malformed
    """
    config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No config at {config_path}, writing defaults")
        save_config(DEFAULT_CONFIG)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config: {e}")


def save_config(config: dict) -> None:
    """Save configuration to file.

    Args:
        config: Dict with configuration values
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)


def get_value(config: dict, key: str, default: Any = None) -> Any:
    """Look up a dotted key such as ``display.indent``.

    Returns ``default`` when any segment is missing or a segment lands on
    a value that is not a table.

    Example:
        >>> get_value({"display": {"indent": "  "}}, "display.indent")
        '  '
    """
    node: Any = config
    for segment in key.split(KEY_SEPARATOR):
        if not isinstance(node, dict) or segment not in node:
            return default
        node = node[segment]
    return node


def set_value(config: dict, key: str, value: Any) -> None:
    """Store ``value`` under a dotted key, creating missing tables.

    Raises:
        ConfigError: If an intermediate segment holds a non-table value

    Example:
        >>> config = {}
        >>> set_value(config, "platform.override", "macos")
        >>> config
        {'platform': {'override': 'macos'}}
    """
    *tables, leaf = key.split(KEY_SEPARATOR)

    node = config
    for segment in tables:
        node = node.setdefault(segment, {})
        if not isinstance(node, dict):
            raise ConfigError(f"Cannot set '{key}': '{segment}' is not a table")
    node[leaf] = value


def resolve_platform(config: dict, requested: str | None = None) -> Platform:
    """Pick the platform used for override resolution.

    Order: explicit request, then ``platform.override`` from config, then
    the detected platform.

    Raises:
        PlatformError: If a requested or configured name is unknown
    """
    if requested:
        return parse_platform(requested)

    configured = get_value(config, "platform.override", "")
    if configured:
        return parse_platform(configured)

    return current_platform()
