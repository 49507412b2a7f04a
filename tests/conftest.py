import logging
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'shiftinclude'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from shiftinclude.core.logging import reset_stdlib_logging_for_tests


_LEAK_PRONE_ENV_KEYS = [
    "SHIFTINCLUDE_SHIFT",
    "SHIFTINCLUDE_MAX_DEPTH",
    "SHIFTINCLUDE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def _isolate_env_and_logging(monkeypatch):
    """Keep SHIFTINCLUDE_* settings and CLI log handlers from leaking between tests."""
    for key in _LEAK_PRONE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    reset_stdlib_logging_for_tests()
    root.setLevel(level)


@pytest.fixture
def write_file(tmp_path):
    """Write a UTF-8 file below tmp_path and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
