"""
Pytest configuration for the ICNDB client tests.

Puts tests/ and scripts/ on sys.path so the fake server and the command-line
script import like plain modules.
"""

import sys
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT), str(_PROJECT_ROOT / "scripts")]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fake_icndb import FakeICNDB  # noqa: E402


@pytest.fixture
def icndb() -> FakeICNDB:
    """A fake ICNDB serving the default corpus"""
    return FakeICNDB()
