"""SPDX-License-Identifier: GPL-3.0-only

Text menu loop: find people, list everyone, exit.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from search import InvalidStrategy, RecordStore, parse_strategy_kind, search_records, strategy_names

LOGGER = logging.getLogger("people_search.console")

Reader = Callable[[], str]

ACTION_EXIT = 0
ACTION_FIND = 1
ACTION_PRINT = 2

# Display order matters: Exit is listed last.
ACTIONS: Dict[int, str] = {
    ACTION_FIND: "Find a person",
    ACTION_PRINT: "Print all people",
    ACTION_EXIT: "Exit",
}


def get_menu_action(reader: Reader, out: TextIO) -> int:
    """Show the menu until the user picks a listed action."""
    while True:
        print("\n=== Menu ===", file=out)
        for key, label in ACTIONS.items():
            print(f"{key}. {label}", file=out)
        raw = reader().strip()
        try:
            action = int(raw)
        except ValueError:
            action = None
        if action in ACTIONS:
            return action
        LOGGER.debug("Rejected menu choice %r", raw)
        print("\nIncorrect option! Try again.", file=out)


def find_person_action(store: RecordStore, reader: Reader, out: TextIO) -> None:
    """Prompt for a strategy and a query, then print the matches.

    Raises:
        InvalidStrategy: If the entered strategy name is unknown.
    """
    print(f"\nSelect a matching strategy: {', '.join(strategy_names())}", file=out)
    kind = parse_strategy_kind(reader())
    print("\nEnter a name or email to search all suitable people.", file=out)
    query = reader().strip()
    found = search_records(store, kind, query)
    if not found:
        print("No matching people found.", file=out)
        return
    for person in found:
        print(person, file=out)


def print_people(store: RecordStore, out: TextIO) -> None:
    print("\n=== List of people ===", file=out)
    for person in store:
        print(person, file=out)


def run_menu(store: RecordStore, reader: Reader = input, out: Optional[TextIO] = None) -> None:
    """Run the menu until the user chooses Exit.

    Args:
        store: Populated record store to search.
        reader: Callable returning the next input line (default: ``input``).
        out: Stream for menu output (default: stdout).
    """
    out = out or sys.stdout
    while True:
        action = get_menu_action(reader, out)
        if action == ACTION_EXIT:
            print("\nBye!", file=out)
            return
        if action == ACTION_FIND:
            try:
                find_person_action(store, reader, out)
            except InvalidStrategy as exc:
                LOGGER.warning("%s", exc)
                print(f"\n{exc}", file=out)
        elif action == ACTION_PRINT:
            print_people(store, out)
