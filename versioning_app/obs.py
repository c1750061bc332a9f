"""Lightweight observability utilities: structured log events and spans.

This module avoids external dependencies to keep the project minimal.
Events are JSON-serialised dicts written through the package logger.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable, Mapping
from contextlib import contextmanager
from typing import Any

LOGGER = logging.getLogger("versioning_app.events")


def log_event(payload: dict[str, Any]) -> None:
    """Emit ``payload`` as a single JSON line at DEBUG level."""

    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("%s", json.dumps(payload, ensure_ascii=False, sort_keys=True))


@contextmanager
def span(
    name: str,
    log: Callable[[dict[str, Any]], None] = log_event,
    *,
    attrs: Mapping[str, Any] | None = None,
) -> Any:
    """Minimal span that logs start/end with elapsed time in ms.

    Usage:
        with span("display_version", attrs={"mode": "snapshot"}):
            ...
    """

    start = time.monotonic()
    payload: dict[str, Any] = {"event": "span_start", "name": name}
    if attrs:
        payload["attrs"] = dict(attrs)
    log(payload)
    try:
        yield
    finally:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        log({"event": "span_end", "name": name, "ms": elapsed_ms})
