"""Shared pytest fixtures for billzy tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from billzy.runtime import load_parser_settings, reset_paths


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point BILLZY_HOME at an empty directory so a user's parser.toml never leaks in."""
    home = tmp_path / "billzy-home"
    home.mkdir()
    monkeypatch.setenv("BILLZY_HOME", str(home))
    reset_paths()
    load_parser_settings.cache_clear()
    yield home
    reset_paths()
    load_parser_settings.cache_clear()
