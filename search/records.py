"""SPDX-License-Identifier: GPL-3.0-only

Ordered record storage that keeps its inverted index in sync.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from .indexer import InvertedIndex

LOGGER = logging.getLogger("people_search.records")


class RecordStore:
    """Append-only list of record lines plus the index built from them.

    A record's id is its position in the store. Adding a record is the only
    way to populate the index, so ``len(store)`` always matches the id range
    the strategies work over.

    Args:
        lines: Optional initial records, ingested in order.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None) -> None:
        self._records: List[str] = []
        self.index = InvertedIndex()
        if lines is not None:
            self.extend(lines)

    def add(self, text: str) -> int:
        """Append a record and index it.

        Args:
            text: Record line, stored verbatim.

        Returns:
            int: The id assigned to the record.
        """
        record_id = len(self._records)
        self._records.append(text)
        self.index.ingest(record_id, text)
        return record_id

    def extend(self, lines: Iterable[str]) -> int:
        """Add several records; returns how many were added."""
        added = 0
        for line in lines:
            self.add(line)
            added += 1
        LOGGER.debug("Added %s records (total=%s)", added, len(self._records))
        return added

    @property
    def records(self) -> Sequence[str]:
        """Read-only view of the stored records in id order."""
        return tuple(self._records)

    def __getitem__(self, record_id: int) -> str:
        return self._records[record_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
