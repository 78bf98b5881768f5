"""SPDX-License-Identifier: GPL-3.0-only

Record sourcing for the console: a data file (one person per line) or an
interactive prompt.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from search import RecordStore

LOGGER = logging.getLogger("people_search.console")

Reader = Callable[[], str]


def read_records_file(path: Path) -> List[str]:
    """Read one record per line from ``path``.

    Lines are kept as written apart from the line terminator; a final newline
    does not produce an extra empty record. Undecodable bytes become U+FFFD
    instead of failing the load.

    Args:
        path: Data file to read (UTF-8).

    Returns:
        list[str]: Record lines in file order.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with Path(path).open('r', encoding='utf-8', errors='replace') as fh:
        return [line.rstrip('\r\n') for line in fh]


def _read_count(reader: Reader, out: TextIO) -> int:
    while True:
        raw = reader().strip()
        try:
            count = int(raw)
        except ValueError:
            count = -1
        if count >= 0:
            return count
        LOGGER.warning("Rejected people count %r", raw)
        print("Please enter a non-negative whole number.", file=out)


def prompt_records(reader: Reader = input, out: Optional[TextIO] = None) -> List[str]:
    """Ask for a count, then read that many records (each stripped)."""
    out = out or sys.stdout
    print("Enter the number of people:", file=out)
    count = _read_count(reader, out)
    print("Enter all people:", file=out)
    return [reader().strip() for _ in range(count)]


def load_store(path: Optional[Path], reader: Reader = input, out: Optional[TextIO] = None) -> RecordStore:
    """Build a record store from ``path`` or, when no path is set, the prompt.

    A file that cannot be read is logged and yields an empty store; the
    console stays usable so the user can still reach the menu.

    Args:
        path: Data file, or None for interactive entry.
        reader: Line source for interactive entry.
        out: Stream for prompts.

    Returns:
        RecordStore: Store with every record ingested in order.
    """
    if path is None:
        lines = prompt_records(reader, out)
    else:
        try:
            lines = read_records_file(path)
        except OSError as exc:
            LOGGER.error("Could not read data file %s: %s", path, exc)
            lines = []
    store = RecordStore(lines)
    LOGGER.info("Loaded %s records (%s distinct words)", len(store), len(store.index))
    return store
