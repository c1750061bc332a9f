from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from versioning_app.obs import log_event, span


def test_span_emits_start_and_end() -> None:
    events: list[dict[str, Any]] = []
    with span("display_version", events.append, attrs={"mode": "snapshot"}):
        pass
    assert [e["event"] for e in events] == ["span_start", "span_end"]
    assert events[0]["attrs"] == {"mode": "snapshot"}
    assert isinstance(events[1]["ms"], int)


def test_span_end_logged_on_error() -> None:
    events: list[dict[str, Any]] = []
    with pytest.raises(RuntimeError):
        with span("failing", events.append):
            raise RuntimeError("boom")
    assert events[-1]["event"] == "span_end"


def test_log_event_writes_json(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="versioning_app.events"):
        log_event({"event": "metric", "name": "x"})
    assert json.loads(caplog.records[-1].getMessage()) == {"event": "metric", "name": "x"}
