"""SPDX-License-Identifier: GPL-3.0-only

Allow ``python -m console``.
"""

from .cli import main

raise SystemExit(main())
