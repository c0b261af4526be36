"""Shared fixtures: every test gets its own config home."""

from __future__ import annotations

import pytest

from configfactory.utils.env import HOME_VARIABLE


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    home = tmp_path / "config-home"
    monkeypatch.setenv(HOME_VARIABLE, str(home))
    return home
