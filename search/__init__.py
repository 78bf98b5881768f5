"""SPDX-License-Identifier: GPL-3.0-only

People Search core package.

Exposes the in-memory keyword search primitives:
	* Inverted index construction (lowercase, whitespace tokens)
	* Boolean matching strategies (ALL / ANY / NONE)
	* Finder projecting matched ids back to record lines
"""

from .tokenizer import tokenize  # noqa: F401
from .indexer import InvertedIndex, build_index  # noqa: F401
from .records import RecordStore  # noqa: F401
from .strategies import (  # noqa: F401
	AllWordMatch,
	AnyWordMatch,
	InvalidStrategy,
	NoneWordMatch,
	SearchStrategy,
	StrategyKind,
	parse_strategy_kind,
	resolve_strategy,
	strategy_names,
)
from .finder import find, search_records  # noqa: F401
