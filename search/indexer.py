"""SPDX-License-Identifier: GPL-3.0-only

Keyword inverted index over person records.

Maps each lowercase word to the set of record ids whose text contains it.
The index only grows: ingestion unions ids into posting sets and nothing is
ever removed during a run.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Set

from .tokenizer import tokenize

LOGGER = logging.getLogger("people_search.index")

EMPTY_POSTINGS: FrozenSet[int] = frozenset()


class InvertedIndex:
    """Word -> posting set mapping built incrementally from record lines.

    Ids are expected to be unique and handed out in increasing order from 0;
    the NONE strategy derives its universe from ``range(record_count)``.
    """

    def __init__(self) -> None:
        self._postings: Dict[str, Set[int]] = {}
        self._ids: Set[int] = set()

    def ingest(self, record_id: int, text: str) -> None:
        """Add every word of ``text`` to the index under ``record_id``.

        Args:
            record_id: Zero-based id of the record.
            text: Record line; may be empty.
        """
        tokens = tokenize(text)
        for token in tokens:
            self._postings.setdefault(token, set()).add(record_id)
        self._ids.add(record_id)
        LOGGER.debug("Ingested record %s (%s tokens, vocabulary=%s)", record_id, len(tokens), len(self._postings))

    def lookup(self, word: str) -> FrozenSet[int]:
        """Return the posting set for ``word`` (empty if unknown).

        The returned set is a snapshot; mutating callers cannot reach the
        index state.
        """
        postings = self._postings.get(word.lower())
        if postings is None:
            return EMPTY_POSTINGS
        return frozenset(postings)

    def words(self) -> List[str]:
        return sorted(self._postings)

    @property
    def record_count(self) -> int:
        """Number of distinct record ids ingested so far."""
        return len(self._ids)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._postings

    def __len__(self) -> int:
        return len(self._postings)


def build_index(lines: Iterable[str]) -> InvertedIndex:
    """Build an index from lines, numbering them from 0.

    Args:
        lines: Record texts in ingestion order.

    Returns:
        InvertedIndex: Populated index.
    """
    index = InvertedIndex()
    for record_id, line in enumerate(lines):
        index.ingest(record_id, line)
    return index
