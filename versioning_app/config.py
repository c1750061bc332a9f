"""Application configuration for display-version computation."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .exceptions import ConfigError

DEFAULT_SNAPSHOT_SUFFIX = "-SNAPSHOT"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class VersioningConfig:
    """Versioning settings read by the release modes."""

    snapshot: str = DEFAULT_SNAPSHOT_SUFFIX

    def get_snapshot(self) -> str:
        """Return the suffix appended to snapshot display versions."""

        return self.snapshot


@dataclass
class AppConfig:
    """Top level configuration container."""

    versioning: VersioningConfig = field(default_factory=VersioningConfig)
    log_level: str = "INFO"

    @classmethod
    def create_default(cls) -> "AppConfig":
        """Create a default configuration instance."""

        return cls()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build a configuration honouring ``VERSIONING_*`` environment variables.

        ``VERSIONING_SNAPSHOT`` may be set to an empty string to disable the
        suffix; only an unset variable falls back to the default.
        """

        env = os.environ if environ is None else environ
        config = cls.create_default()

        snapshot = env.get("VERSIONING_SNAPSHOT")
        if snapshot is not None:
            config.versioning = VersioningConfig(snapshot=snapshot)

        level = env.get("VERSIONING_LOG_LEVEL")
        if level:
            normalised = level.strip().upper()
            if normalised not in LOG_LEVELS:
                raise ConfigError(
                    f"Unsupported log level '{level}'. Available: {', '.join(LOG_LEVELS)}",
                    error_code="invalid_log_level",
                    context={"VERSIONING_LOG_LEVEL": level},
                )
            config.log_level = normalised

        return config
