# tests/conftest.py
# Pin the home directory so shorten/cd/expand are deterministic.

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at a fresh directory and clear the PA_HOME override."""
    h = tmp_path / "home" / "user"
    h.mkdir(parents=True)
    monkeypatch.delenv("PA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(h))
    return h


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test inside tmp_path; pytest restores the old cwd afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
