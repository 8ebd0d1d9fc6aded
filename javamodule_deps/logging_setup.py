"""
Logging bootstrap for the CLI.
Console output goes through Rich; an optional JSONL sink keeps structured records.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from .console import console
from .log_filter import DiagnosticsLogFilter

DEFAULT_PATH = os.environ.get("JAVAMODULE_DEPS_LOG_PATH")
DEFAULT_LEVEL = os.environ.get("JAVAMODULE_DEPS_LOG_LEVEL", "INFO").upper()

_RECORD_FIELDS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime"}
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            base = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "schema": {"name": "javamodule-deps.log", "ver": "1.0.0"},
                "logger": record.name,
                "message": record.getMessage(),
            }
            # Attach any extra fields on the record
            for k, v in record.__dict__.items():
                if k not in _RECORD_FIELDS:
                    base.setdefault(k, v)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(base, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


def init_logging(level: str | None = None, jsonl_path: str | None = None) -> None:
    """Install the Rich console handler and, if a path is given, the JSONL sink."""
    level = (level or DEFAULT_LEVEL).upper()
    jsonl_path = jsonl_path or DEFAULT_PATH
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    # Remove handlers installed by an earlier call to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, (JsonlHandler, RichHandler)):
            root.removeHandler(h)
    console_handler = RichHandler(console=console, show_path=False, markup=False)
    console_handler.addFilter(DiagnosticsLogFilter())
    root.addHandler(console_handler)
    if jsonl_path:
        root.addHandler(JsonlHandler(jsonl_path))
