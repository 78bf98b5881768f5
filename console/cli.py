"""SPDX-License-Identifier: GPL-3.0-only

Command line entry point: load people, then run the search menu.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .loader import load_store
from .logging_config import configure_logging
from .menu import run_menu

LOGGER = logging.getLogger("people_search.console")

EXIT_OK = 0
EXIT_INTERRUPTED = 130

_TRUTHY = {"1", "TRUE", "YES", "Y"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().upper() in _TRUTHY


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search a list of people by name or email")
    p.add_argument("--data", dest="data", default=os.environ.get("PEOPLE_SEARCH_DATA") or None,
                   help="File with one person per line (default: prompt for people; env PEOPLE_SEARCH_DATA)")
    p.add_argument("--log-level", default=os.environ.get("PEOPLE_SEARCH_LOG_LEVEL", "WARNING"),
                   help="Logging level (default: WARNING; env PEOPLE_SEARCH_LOG_LEVEL)")
    p.add_argument("--log-json", action="store_true", default=_env_flag("PEOPLE_SEARCH_LOG_JSON"),
                   help="Emit JSON log lines (env PEOPLE_SEARCH_LOG_JSON)")
    p.add_argument("--log-file", dest="log_file", default=os.environ.get("PEOPLE_SEARCH_LOG_FILE") or None,
                   help="Write logs to this file instead of stderr (env PEOPLE_SEARCH_LOG_FILE)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(
        level=args.log_level,
        json_mode=args.log_json,
        log_path=Path(args.log_file) if args.log_file else None,
    )
    data_path = Path(args.data) if args.data else None
    try:
        store = load_store(data_path)
        run_menu(store)
    except (EOFError, KeyboardInterrupt):
        LOGGER.info("Input closed; exiting")
        print("\nBye!")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
