from __future__ import annotations

import os
from pathlib import Path
import sys
from unittest import mock


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def clean_env():
    """
    Hide MEMORABLE_* variables from the host and undo anything a test (or dotenv) sets.
    """
    with mock.patch.dict(os.environ):
        for name in [k for k in os.environ if k.startswith("MEMORABLE_")]:
            del os.environ[name]
        yield


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """A backing-file path that does not exist yet."""
    return tmp_path / "db.json"
