"""
Pytest configuration and fixtures.

Ensures src/ is importable and provides sample archives.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add src/ to Python path if not already present
repo_root = Path(__file__).parent.parent
src_path = repo_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


SCENARIO_ARCHIVE = ">>>> a.txt\nhello\n>>>> b.txt:part0\nfoo\n>>>> b.txt:part1\nbar\n"


@pytest.fixture
def scenario_text() -> str:
    """The a.txt / chunked b.txt archive used across tests."""
    return SCENARIO_ARCHIVE


@pytest.fixture
def archive_file(tmp_path: Path) -> Path:
    """An archive on disk with a plain file, a nested file and a chunked file."""
    path = tmp_path / "bundle.txt"
    path.write_text(
        "Preamble written by the archiver\n"
        ">>>> README.md\n"
        "# Demo\n"
        ">>>> src/app.py:part1\n"
        "    return greeting\n"
        ">>>> src/app.py:part0\n"
        "def greet():\n"
        "    greeting = 'hi'\n\n"
        ">>>> src/util/__init__.py\n",
        encoding="utf-8",
    )
    return path
