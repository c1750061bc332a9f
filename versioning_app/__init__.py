"""Display-version computation for snapshot builds."""

__version__ = "1.0.0"

from .config import AppConfig, VersioningConfig
from .exceptions import ConfigError, InvalidArgumentError, VersioningError
from .release_mode import (
    RELEASE_MODES,
    SNAPSHOT_RELEASE_MODE,
    ReleaseMode,
    SnapshotReleaseMode,
    get_release_mode,
)

__all__ = [
    "AppConfig",
    "VersioningConfig",
    "ConfigError",
    "InvalidArgumentError",
    "VersioningError",
    "RELEASE_MODES",
    "SNAPSHOT_RELEASE_MODE",
    "ReleaseMode",
    "SnapshotReleaseMode",
    "get_release_mode",
]
