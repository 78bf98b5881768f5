"""SPDX-License-Identifier: GPL-3.0-only

Boolean matching strategies over an inverted index.

Three policies share one signature, ``match(query, record_count) -> set[int]``:

	* ALL  - records containing every query word
	* ANY  - records containing at least one query word
	* NONE - records containing none of the query words

Note the asymmetry for empty queries: ALL yields nothing (there is no
"everyone" starting set), while NONE yields every record since no word
excludes anyone.
"""

from __future__ import annotations

import enum
import logging
from typing import Protocol, Set, Union

from .indexer import InvertedIndex
from .tokenizer import tokenize

LOGGER = logging.getLogger("people_search.strategies")


class InvalidStrategy(ValueError):
    """Raised when a strategy selector does not name a known strategy."""


class StrategyKind(enum.Enum):
    ALL = "ALL"
    ANY = "ANY"
    NONE = "NONE"


class SearchStrategy(Protocol):
    """Protocol implemented by every matching strategy."""

    def match(self, query: str, record_count: int) -> Set[int]:
        """Return ids of records matching ``query``."""
        ...


class AnyWordMatch:
    """Union of the posting sets of every known query word."""

    def __init__(self, index: InvertedIndex) -> None:
        self.index = index

    def match(self, query: str, record_count: int) -> Set[int]:
        result: Set[int] = set()
        for token in tokenize(query):
            if token in self.index:
                result |= self.index.lookup(token)
        return result


class AllWordMatch:
    """Intersection of the posting sets of every query word.

    An unknown word has an empty posting set, which empties the result for
    good, so the reduction stops at the first empty set.
    """

    def __init__(self, index: InvertedIndex) -> None:
        self.index = index

    def match(self, query: str, record_count: int) -> Set[int]:
        tokens = tokenize(query)
        if not tokens:
            return set()
        result: Set[int] = set(self.index.lookup(tokens[0]))
        for token in tokens[1:]:
            if not result:
                break
            result &= self.index.lookup(token)
        return result


class NoneWordMatch:
    """Complement of :class:`AnyWordMatch` within ``range(record_count)``."""

    def __init__(self, index: InvertedIndex) -> None:
        self.index = index
        self._any = AnyWordMatch(index)

    def match(self, query: str, record_count: int) -> Set[int]:
        excluded = self._any.match(query, record_count)
        return {record_id for record_id in range(record_count) if record_id not in excluded}


_STRATEGY_TYPES = {
    StrategyKind.ALL: AllWordMatch,
    StrategyKind.ANY: AnyWordMatch,
    StrategyKind.NONE: NoneWordMatch,
}


def strategy_names() -> list[str]:
    """Names accepted by :func:`parse_strategy_kind`, in display order."""
    return [kind.name for kind in StrategyKind]


def parse_strategy_kind(selector: Union[StrategyKind, str]) -> StrategyKind:
    """Resolve a selector (enum member or name) to a :class:`StrategyKind`.

    Names are matched case-insensitively after trimming whitespace.

    Raises:
        InvalidStrategy: If the selector names no strategy.
    """
    if isinstance(selector, StrategyKind):
        return selector
    if isinstance(selector, str):
        name = selector.strip().upper()
        if name in StrategyKind.__members__:
            return StrategyKind[name]
    raise InvalidStrategy(
        f"Unknown matching strategy {selector!r}; expected one of: {', '.join(strategy_names())}"
    )


def resolve_strategy(selector: Union[StrategyKind, str], index: InvertedIndex) -> SearchStrategy:
    """Build the strategy named by ``selector`` bound to ``index``.

    Args:
        selector: StrategyKind member or its name (``"ALL"``, ``"ANY"``, ``"NONE"``).
        index: Index the strategy will query.

    Returns:
        SearchStrategy: Object exposing ``match(query, record_count)``.

    Raises:
        InvalidStrategy: If the selector names no strategy.
    """
    kind = parse_strategy_kind(selector)
    LOGGER.debug("Resolved strategy %s", kind.name)
    return _STRATEGY_TYPES[kind](index)
