#!/usr/bin/env python
"""SPDX-License-Identifier: GPL-3.0-only

Pre-commit hook reporting Python files that lack the SPDX license identifier.

Usage:
    spdx_header_hook.py [--fix] FILE...

A file passes when the identifier appears in its first five lines. With
``--fix`` a missing header is inserted:
    * after a shebang line, if any;
    * as a ``#`` comment when the file already opens with a docstring;
    * otherwise as a new module docstring.

Exit status is 1 when any file was missing the header (fixed or not), so the
commit stops and the user can re-stage.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, List

SPDX_TEXT = "SPDX-License-Identifier: GPL-3.0-only"
HEADER_WINDOW = 5


def has_spdx(lines: List[str]) -> bool:
    return any(SPDX_TEXT in line for line in lines[:HEADER_WINDOW])


def with_header(lines: List[str]) -> List[str]:
    """Return ``lines`` with the SPDX header inserted at the right spot."""
    head: List[str] = []
    body = lines
    if body and body[0].startswith("#!"):
        head, body = body[:1], body[1:]
    first = next((line for line in body if line.strip()), "")
    if first.lstrip().startswith(('"""', "'''")):
        header = [f"# {SPDX_TEXT}\n"]
    else:
        header = [f'"""{SPDX_TEXT}\n', '"""\n', "\n"]
    return head + header + body


def iter_python_files(names: List[str]) -> Iterator[Path]:
    for name in names:
        path = Path(name)
        if path.suffix == ".py" and path.is_file():
            yield path


def main(argv: List[str]) -> int:
    p = argparse.ArgumentParser(description="Check Python files for an SPDX header")
    p.add_argument("--fix", action="store_true", help="Insert the header where missing")
    p.add_argument("files", nargs="*")
    args = p.parse_args(argv)

    missing = 0
    for path in iter_python_files(args.files):
        lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
        if has_spdx(lines):
            continue
        missing += 1
        if args.fix:
            path.write_text("".join(with_header(lines)), encoding="utf-8")
            print(f"Added SPDX header: {path}")
        else:
            print(f"Missing SPDX header: {path}")
    return 1 if missing else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
