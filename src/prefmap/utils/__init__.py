"""Utility functions for prefmap.

This module contains:
- Line reading for preference streams
- CLI config file management
"""

from .config import get_config_path, get_value, load_config, save_config, set_value
from .lines import read_lines

__all__ = [
    "load_config",
    "save_config",
    "get_value",
    "set_value",
    "get_config_path",
    "read_lines",
]
