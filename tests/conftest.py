"""SPDX-License-Identifier: GPL-3.0-only

Test configuration: add project root to sys.path for package imports.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from search import RecordStore

PEOPLE = [
    "Alice Smith alice@x.com",
    "Bob Jones bob@x.com",
    "Alice Bob shared@x.com",
]


@pytest.fixture
def people():
    return list(PEOPLE)


@pytest.fixture
def store(people):
    """RecordStore holding the three sample people (ids 0, 1, 2)."""
    return RecordStore(people)


@pytest.fixture
def scripted_reader():
    """Build a reader callable that replays lines, raising EOFError when exhausted."""

    def _make(*lines: str):
        pending = list(lines)

        def _read() -> str:
            if not pending:
                raise EOFError
            return pending.pop(0)

        return _read

    return _make


@pytest.fixture(autouse=True)
def reset_logging_config():
    """Drop handlers installed by console.logging_config between tests."""
    yield
    from console.logging_config import reset_logging

    reset_logging()
