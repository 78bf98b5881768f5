"""SPDX-License-Identifier: GPL-3.0-only

Query orchestration: run a strategy and map matching ids back to records."""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

from .records import RecordStore
from .strategies import SearchStrategy, StrategyKind, resolve_strategy

LOGGER = logging.getLogger("people_search.finder")


def find(strategy: SearchStrategy, query: str, records: Sequence[str]) -> List[str]:
    """Return the records matched by ``strategy`` in ascending id order.

    Args:
        strategy: Any object implementing ``match(query, record_count)``.
        query: Raw query string.
        records: All records, indexed by id.

    Returns:
        list[str]: Matching record texts, ordered by ingestion (not relevance).

    Raises:
        IndexError: If the strategy returned an id outside ``records``.
    """
    ids = sorted(strategy.match(query, len(records)))
    for record_id in ids:
        if not 0 <= record_id < len(records):
            raise IndexError(f"strategy returned record id {record_id} outside 0..{len(records) - 1}")
    LOGGER.debug("Query %r matched %s of %s records", query, len(ids), len(records))
    return [records[record_id] for record_id in ids]


def search_records(store: RecordStore, selector: Union[StrategyKind, str], query: str) -> List[str]:
    """Resolve ``selector`` against the store's index and run ``query``.

    Args:
        store: Populated record store.
        selector: StrategyKind member or name (``ALL``/``ANY``/``NONE``).
        query: Raw query string.

    Returns:
        list[str]: Matching record texts in ascending id order.

    Raises:
        InvalidStrategy: If ``selector`` names no strategy.
    """
    strategy = resolve_strategy(selector, store.index)
    return find(strategy, query, store.records)
