"""prefmap - Ordered key=value preferences with platform overrides."""

from importlib.metadata import PackageNotFoundError, version

from prefmap.constants import Platform
from prefmap.core.platform import current_platform
from prefmap.core.store import PreferencesMap


def _get_version() -> str:
    """Get version from package metadata."""
    try:
        return version("prefmap")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = ["PreferencesMap", "Platform", "current_platform", "__version__"]
