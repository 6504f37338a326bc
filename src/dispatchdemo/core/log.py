from __future__ import annotations

import logging
import os
import sys
import json
from typing import Optional

from dotenv import load_dotenv

_configured = False
_env_loaded = False

DEFAULT_LEVEL = "WARNING"


def load_env() -> None:
    """Load .env into os.environ once per process."""
    global _env_loaded
    if _env_loaded:
        return
    load_dotenv()
    _env_loaded = True


class JsonHandler(logging.StreamHandler):
    """One JSON object per record, on stderr (stdout belongs to the demo)."""
    def __init__(self):
        super().__init__(stream=sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            obj = {
                "ts": record.created,
                "lvl": record.levelname,
                "name": record.name,
                "msg": record.getMessage(),
            }
            for k in ("filename", "lineno", "funcName"):
                obj[k] = getattr(record, k, None)
            self.stream.write(json.dumps(obj, ensure_ascii=False, default=str) + "\n")
            self.flush()
        except Exception:  # pragma: no cover
            self.handleError(record)


def setup(level: Optional[str] = None, json_mode: Optional[bool] = None, *, force: bool = False) -> None:
    """Configure root logger.
    - Reads LOG_LEVEL, LOG_JSON from env (after loading .env) if args are None
    - If already configured, do nothing unless force=True
    """
    global _configured
    if _configured and not force:
        return

    load_env()

    lvl = (level or os.getenv("LOG_LEVEL", DEFAULT_LEVEL)).upper()
    py_level = getattr(logging, lvl, None)
    if not isinstance(py_level, int):
        py_level = logging.WARNING

    json_flag = json_mode if json_mode is not None else (os.getenv("LOG_JSON", "0") == "1")

    root = logging.getLogger()
    # Reset handlers to avoid duplicate logs (pytest re-runs etc.)
    root.handlers.clear()
    root.setLevel(py_level)

    if json_flag:
        handler = JsonHandler()
    else:
        fmt = "[%(asctime)s] %(levelname)s %(name)s | %(message)s"
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=fmt))
    root.addHandler(handler)

    _configured = True


def get(name: str) -> logging.Logger:
    """Helper to get a namespaced logger."""
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Dynamically adjust root log level (e.g., during tests)."""
    py_level = getattr(logging, level.upper(), None)
    logging.getLogger().setLevel(py_level if isinstance(py_level, int) else logging.WARNING)
