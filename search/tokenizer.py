"""SPDX-License-Identifier: GPL-3.0-only

Word tokenization shared by record ingestion and query parsing.

Records and queries must be split identically, otherwise a word indexed from
a record could never be found again by a query.
"""

from __future__ import annotations

import re
from typing import List

# ASCII whitespace only; NBSP and other Unicode spaces stay inside a word.
_WHITESPACE = re.compile(r"[ \t\n\x0b\f\r]+")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase words.

    Args:
        text: Raw record line or query string.

    Returns:
        list[str]: Tokens in input order, duplicates kept. Empty or
        whitespace-only input yields an empty list.
    """
    if not text:
        return []
    return [token for token in _WHITESPACE.split(text.lower()) if token]
