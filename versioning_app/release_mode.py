"""Release modes deciding which version string is displayed for an artifact."""

from __future__ import annotations

import logging
from typing import Protocol

from .config import VersioningConfig
from .exceptions import ConfigError, InvalidArgumentError

LOGGER = logging.getLogger(__name__)

# No-break spaces and NEL count as content, although str.isspace() accepts them.
_NOT_WHITESPACE = frozenset("\u00a0\u2007\u202f\x85")


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, ``""`` or a string made only of whitespace."""

    if value is None:
        return True
    return all(_is_whitespace(char) for char in value)


def is_not_blank(value: str | None) -> bool:
    return not is_blank(value)


def _read_snapshot(config: VersioningConfig) -> object:
    accessor = getattr(config, "get_snapshot", None)
    if callable(accessor):
        return accessor()
    return getattr(config, "snapshot", None)


class ReleaseMode(Protocol):
    """Capability shared by every release mode."""

    def get_display_version(
        self,
        next_tag: str,
        last_tag: str | None,
        current_tag: str | None,
        config: VersioningConfig,
    ) -> str | None:
        ...


class SnapshotReleaseMode:
    """Snapshot release mode.

    When the working copy sits on a recognisable tag state (``current_tag`` is
    not blank) the display version is the next tag followed by the configured
    snapshot suffix. Otherwise ``current_tag`` is returned untouched, including
    ``None`` and whitespace-only values.
    """

    name = "snapshot"

    def get_display_version(
        self,
        next_tag: str,
        last_tag: str | None,
        current_tag: str | None,
        config: VersioningConfig,
    ) -> str | None:
        if next_tag is None:
            raise InvalidArgumentError("next_tag must not be None", context={"mode": self.name})
        if config is None:
            raise InvalidArgumentError("config must not be None", context={"mode": self.name})
        snapshot = _read_snapshot(config)
        if not isinstance(snapshot, str):
            raise InvalidArgumentError(
                "config snapshot suffix must be a string",
                context={"mode": self.name, "snapshot_type": type(snapshot).__name__},
            )

        if is_not_blank(current_tag):
            display = f"{next_tag}{snapshot}"
            LOGGER.debug("current tag %r present; displaying %r", current_tag, display)
            return display

        LOGGER.debug("current tag is blank; displaying it verbatim")
        return current_tag

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


SNAPSHOT_RELEASE_MODE: ReleaseMode = SnapshotReleaseMode()

RELEASE_MODES: dict[str, ReleaseMode] = {
    "snapshot": SNAPSHOT_RELEASE_MODE,
}


def get_release_mode(name: str) -> ReleaseMode:
    """Look up a registered release mode by name (case-insensitive)."""

    key = (name or "").strip().lower()
    try:
        return RELEASE_MODES[key]
    except KeyError:
        raise ConfigError(
            f"Unsupported release mode '{name}'. Available: {', '.join(sorted(RELEASE_MODES))}",
            error_code="unknown_release_mode",
            context={"mode": name},
        ) from None
