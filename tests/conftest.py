"""Root test configuration: environment isolation and cleanup of runtime artifacts"""

import os
import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["dist"]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Drop MDPAGE_* variables so a developer's shell config never leaks into tests."""
    for name in list(os.environ):
        if name.startswith("MDPAGE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove output directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)
