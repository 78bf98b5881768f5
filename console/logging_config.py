"""SPDX-License-Identifier: GPL-3.0-only

Centralized logging configuration for the people search console.
Provides:
  configure_logging(level:str='WARNING', json_mode:bool=False, log_path:Path|None=None)
  set_runtime_level(level:str)
  get_runtime_level() -> str

Features:
  * Idempotent root logger setup guarded by a lock.
  * Human readable lines or JSON structured lines.
  * stderr output by default so log lines never mix with menu output on stdout.
  * Optional log file with size-based rotation (single .1 rollover).
"""
from __future__ import annotations

import json
import logging
import sys
import threading
import time
from pathlib import Path
from typing import Optional

_LOCK = threading.Lock()
_CONFIGURED = False
_CURRENT_LEVEL = 'WARNING'
_HANDLER: Optional[logging.Handler] = None

LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
DEFAULT_ROTATE_BYTES = 1024 * 1024


def normalize_level(level: Optional[str]) -> str:
    """Upper-case a level name, falling back to WARNING for unknown names."""
    name = (level or '').strip().upper()
    return name if name in LEVEL_NAMES else 'WARNING'


class _RotatingFileHandler(logging.Handler):
    """Append to ``path``; move it to ``path.1`` once it would exceed ``max_bytes``."""

    def __init__(self, path: Path, max_bytes: int = DEFAULT_ROTATE_BYTES) -> None:
        super().__init__()
        self.path = path
        self.max_bytes = max(1024, max_bytes)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _rollover_if_needed(self, incoming: int) -> None:
        if not self.path.exists():
            return
        if self.path.stat().st_size + incoming <= self.max_bytes:
            return
        backup = self.path.with_name(self.path.name + '.1')
        backup.unlink(missing_ok=True)
        self.path.rename(backup)

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        try:
            line = self.format(record) + '\n'
            self._rollover_if_needed(len(line.encode('utf-8')))
            with self.path.open('a', encoding='utf-8') as fh:
                fh.write(line)
        except Exception:  # pragma: no cover
            self.handleError(record)


class _DualFormatter(logging.Formatter):
    """Render either ``[ts] LEVEL logger: msg`` or a JSON object per line."""

    def __init__(self, json_mode: bool):
        super().__init__()
        self.json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        stamp = time.strftime('%Y-%m-%dT%H:%M:%S', time.localtime(record.created))
        fields = {
            'ts': f"{stamp}.{int(record.msecs):03d}",
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        if record.exc_info:
            fields['exc'] = self.formatException(record.exc_info)
        if self.json_mode:
            return json.dumps(fields, ensure_ascii=False)
        line = f"[{fields['ts']}] {fields['level']} {fields['logger']}: {fields['msg']}"
        if 'exc' in fields:
            line += '\n' + fields['exc']
        return line


def configure_logging(level: str = 'WARNING', json_mode: bool = False, log_path: Optional[Path] = None) -> None:
    """Install the single root handler (subsequent calls only change the level)."""
    global _CONFIGURED, _CURRENT_LEVEL, _HANDLER
    with _LOCK:
        _CURRENT_LEVEL = normalize_level(level)
        root = logging.getLogger()
        root.setLevel(_CURRENT_LEVEL)
        if _CONFIGURED:
            return
        if log_path is not None:
            handler: logging.Handler = _RotatingFileHandler(Path(log_path))
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_DualFormatter(bool(json_mode)))
        # Drop pre-existing handlers to avoid duplicate lines
        for existing in list(root.handlers):
            root.removeHandler(existing)
        root.addHandler(handler)
        _HANDLER = handler
        _CONFIGURED = True


def set_runtime_level(level: str) -> None:
    global _CURRENT_LEVEL
    with _LOCK:
        _CURRENT_LEVEL = normalize_level(level)
        logging.getLogger().setLevel(_CURRENT_LEVEL)


def get_runtime_level() -> str:
    return _CURRENT_LEVEL


def reset_logging() -> None:
    """Remove the installed handler so the next configure_logging starts fresh."""
    global _CONFIGURED, _HANDLER
    with _LOCK:
        if _HANDLER is not None:
            logging.getLogger().removeHandler(_HANDLER)
            _HANDLER.close()
        _HANDLER = None
        _CONFIGURED = False


__all__ = ['configure_logging', 'set_runtime_level', 'get_runtime_level', 'reset_logging', 'normalize_level']
