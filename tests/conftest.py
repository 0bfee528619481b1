"""Root test configuration: isolate tests from user config and STRDIFF_* env vars"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory with no STRDIFF_* overrides set."""
    for name in list(os.environ):
        if name.startswith("STRDIFF_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
