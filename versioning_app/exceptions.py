"""Error taxonomy for display-version computation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any


class VersioningError(Exception):
    """Base application error carrying a stable code and structured context."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.context = dict(context or {})
        super().__init__(self.get_error_message())

    def get_error_message(self) -> str:
        return f"[{self.error_code}] {self.message}" if self.error_code else self.message

    def log_error(self, logger: logging.Logger) -> None:
        logger.error(
            "%s",
            {
                "event": "error",
                "error_code": self.error_code,
                "message": self.message,
                "context": self.context,
            },
        )


class ConfigError(VersioningError):
    """Configuration error (e.g., unknown release mode or log level)."""


class InvalidArgumentError(ValueError, VersioningError):
    """A caller passed a missing or malformed argument (retains ValueError type)."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        ValueError.__init__(self, message)
        VersioningError.__init__(self, message, error_code="invalid_argument", context=context)
