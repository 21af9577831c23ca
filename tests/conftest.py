"""Shared test fixtures — a small workspace on disk, a fresh file cache."""

import os

# Keep a developer's DRIFTSCOPE_* environment out of the tests.
for _key in [k for k in os.environ if k.startswith("DRIFTSCOPE_")]:
    del os.environ[_key]

from pathlib import Path

import pytest

from driftscope.locations.file_cache import LocalFileCache
from tests.fixtures.workspace import A_PY, UTIL_PY


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Workspace with ``src/a.py`` and ``src/util.py``."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.py").write_text(A_PY, encoding="utf-8")
    (src / "util.py").write_text(UTIL_PY, encoding="utf-8")
    return tmp_path


@pytest.fixture
def a_py(workspace: Path) -> Path:
    return workspace / "src" / "a.py"


@pytest.fixture
def cache() -> LocalFileCache:
    return LocalFileCache()
