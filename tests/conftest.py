from typing import Iterator

import pytest

from versioning_app.config import AppConfig, VersioningConfig


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig.create_default()


@pytest.fixture()
def snapshot_config() -> VersioningConfig:
    return VersioningConfig(snapshot="-SNAPSHOT")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    monkeypatch.delenv("VERSIONING_SNAPSHOT", raising=False)
    monkeypatch.delenv("VERSIONING_LOG_LEVEL", raising=False)
    yield monkeypatch
