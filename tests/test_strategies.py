"""SPDX-License-Identifier: GPL-3.0-only

Tests for the ALL / ANY / NONE matching strategies.
"""

from __future__ import annotations

import pytest

from search import (
    AllWordMatch,
    AnyWordMatch,
    InvalidStrategy,
    NoneWordMatch,
    StrategyKind,
    resolve_strategy,
)
from search.strategies import parse_strategy_kind, strategy_names

QUERIES = ["alice", "bob", "alice bob", "bob alice", "jones zzz", "zzz", "", "  ", "ALICE x.com"]


def test_any_unions_known_words(store):
    assert AnyWordMatch(store.index).match("alice jones", len(store)) == {0, 1, 2}
    assert AnyWordMatch(store.index).match("smith zzz", len(store)) == {0}


def test_any_is_order_independent(store):
    any_match = AnyWordMatch(store.index)
    assert any_match.match("bob alice", 3) == any_match.match("alice bob", 3)


def test_any_empty_or_unknown_query_is_empty(store):
    any_match = AnyWordMatch(store.index)
    assert any_match.match("", 3) == set()
    assert any_match.match("zzz yyy", 3) == set()


def test_all_intersects_posting_sets(store):
    assert AllWordMatch(store.index).match("alice bob", 3) == {2}
    assert AllWordMatch(store.index).match("Alice", 3) == {0, 2}


def test_all_unknown_word_empties_result_for_good(store):
    all_match = AllWordMatch(store.index)
    assert all_match.match("zzz alice", 3) == set()
    assert all_match.match("alice zzz bob", 3) == set()


def test_all_empty_query_matches_nobody(store):
    assert AllWordMatch(store.index).match("", 3) == set()


def test_none_is_complement_of_any(store):
    assert NoneWordMatch(store.index).match("alice", 3) == {1}


def test_none_empty_query_matches_everyone(store):
    assert NoneWordMatch(store.index).match("", 3) == {0, 1, 2}
    assert NoneWordMatch(store.index).match("zzz", 3) == {0, 1, 2}


@pytest.mark.parametrize("query", QUERIES)
def test_all_is_subset_of_any(store, query):
    assert AllWordMatch(store.index).match(query, 3) <= AnyWordMatch(store.index).match(query, 3)


@pytest.mark.parametrize("query", QUERIES)
def test_none_and_any_partition_ids(store, query):
    n = len(store)
    any_ids = AnyWordMatch(store.index).match(query, n)
    none_ids = NoneWordMatch(store.index).match(query, n)
    assert any_ids | none_ids == set(range(n))
    assert any_ids & none_ids == set()


@pytest.mark.parametrize(
    "selector, expected",
    [
        (StrategyKind.ALL, AllWordMatch),
        ("ANY", AnyWordMatch),
        (" none ", NoneWordMatch),
        ("All", AllWordMatch),
    ],
)
def test_resolve_strategy(store, selector, expected):
    strategy = resolve_strategy(selector, store.index)
    assert isinstance(strategy, expected)
    assert strategy.index is store.index


@pytest.mark.parametrize("selector", ["", "SOME", "AL L", None, 1])
def test_resolve_strategy_rejects_unknown(store, selector):
    with pytest.raises(InvalidStrategy) as excinfo:
        resolve_strategy(selector, store.index)
    assert "ALL, ANY, NONE" in str(excinfo.value)


def test_invalid_strategy_is_value_error():
    with pytest.raises(ValueError):
        parse_strategy_kind("MOST")


def test_strategy_names_in_declared_order():
    assert strategy_names() == ["ALL", "ANY", "NONE"]
