"""Shared pytest fixtures for date_utils tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest

from date_utils.config.discovery import CONFIG_ENV_VAR
from date_utils.config.settings import DateUtilsSettings
from date_utils.domain.types import OffsetType


@pytest.fixture
def utc() -> OffsetType:
    return OffsetType.utc()


@pytest.fixture
def fixed_now() -> datetime:
    """Reference "now" used by future-date tests."""
    return datetime(2025, 1, 1, tzinfo=UTC)


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Isolated directory with no config discovery leaking in from the environment."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for key in (
        "DATE_UTILS_VERBOSE",
        "DATE_UTILS_LOG_JSON",
        "DATE_UTILS_PARSING__STRICT_FULL_ONLY",
        "DATE_UTILS_PARSING__REJECT_FUTURE",
        "DATE_UTILS_PARSING__DEFAULT_DATE_TYPE",
        "DATE_UTILS_OFFSET__SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


def make_settings(root: Path, toml: str = "", **overrides: object) -> DateUtilsSettings:
    """Write *toml* to ``root/date_utils.toml`` and load settings from it."""
    path = root / "date_utils.toml"
    path.write_text(toml, encoding="utf-8")
    return DateUtilsSettings.load(config_path=path, **overrides)
