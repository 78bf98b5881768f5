"""SPDX-License-Identifier: GPL-3.0-only

People Search console package.

Sources records (data file or prompt), runs the text menu and configures
logging for interactive use.
"""

from .loader import load_store, prompt_records, read_records_file  # noqa: F401
from .menu import run_menu  # noqa: F401
from .logging_config import configure_logging  # noqa: F401
