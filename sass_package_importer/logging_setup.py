"""JSONL logging bootstrap for the importer.

The library only logs through ``logging.getLogger(__name__)``; hosts decide
where records go. ``init_json_logging`` gives scripts and the ``sass-pkg``
CLI one canonical JSONL sink.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

DEFAULT_PATH = os.environ.get("SASS_IMPORTER_LOG_PATH", "./sass-importer.log.jsonl")
DEFAULT_LEVEL = os.environ.get("SASS_IMPORTER_LOG_LEVEL", "INFO").upper()

# Standard LogRecord attributes; anything else on a record was passed via ``extra``
_RECORD_FIELDS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
    }
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_record(self, record: logging.LogRecord) -> dict:
        base = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "sass-importer.log", "ver": "1.0.0"},
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            base["error"] = f"{type(record.exc_info[1]).__name__}: {record.exc_info[1]}"
        for k, v in record.__dict__.items():
            if k in _RECORD_FIELDS:
                continue
            base.setdefault(k, v)
        return base

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = json.dumps(self.format_record(record), ensure_ascii=False, default=str)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | Path | None = None, level: str | None = None) -> JsonlHandler:
    """Attach a JSONL sink to the ``sass_package_importer`` logger, replacing any earlier one."""
    path = path or DEFAULT_PATH
    level = (level or DEFAULT_LEVEL).upper()
    logger = logging.getLogger("sass_package_importer")
    logger.setLevel(getattr(logging, level, logging.INFO))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(logger.handlers):
        if isinstance(h, JsonlHandler):
            logger.removeHandler(h)
    handler = JsonlHandler(path)
    logger.addHandler(handler)
    return handler
