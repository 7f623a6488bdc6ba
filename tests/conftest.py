# tests/conftest.py
import os
import sys

import pytest

# path to the repo root (one level up from tests/)
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# ensure repo root is importable so `import playerctl_wrapper.*` works
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

os.environ.setdefault("PLAYERCTL_SKIP_STARTUP", "1")

@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    # tests assume the shipped yaml: plain `playerctl`, no player filters
    monkeypatch.delenv("PLAYERCTL_BIN", raising=False)
    monkeypatch.delenv("PLAYERCTL_CONFIG", raising=False)
