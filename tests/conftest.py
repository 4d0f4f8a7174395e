"""Shared test fixtures for modegen."""

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"
MODES_FIXTURES = FIXTURES / "modes"


@pytest.fixture
def modes_dir(tmp_path):
    """A writable copy of the fixture mode documents."""
    target = tmp_path / "modes"
    shutil.copytree(MODES_FIXTURES, target)
    return target


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("MODEGEN_MODES_DIR", raising=False)
    monkeypatch.delenv("MODEGEN_OUTPUT", raising=False)
