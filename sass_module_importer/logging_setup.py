"""JSONL log sink for the sass-importer CLI.

Each record becomes one JSON object per line. Fields passed through
``extra=`` (e.g. ``specifier``, ``base``) are kept as top-level keys.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

LOG_PATH_ENV = "SASS_IMPORTER_LOG_PATH"
LOG_LEVEL_ENV = "SASS_IMPORTER_LOG_LEVEL"

# Attributes every LogRecord carries; anything else came from extra=
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonlFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS}
        payload.update((k, v) for k, v in extras.items() if k not in payload)
        return json.dumps(payload, ensure_ascii=False, default=str)


class JsonlHandler(logging.FileHandler):
    """Append-mode file handler that writes JSONL records."""

    def __init__(self, path: str | Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(path, mode="a", encoding="utf-8")
        self.setFormatter(JsonlFormatter())


def init_json_logging(path: str | None = None, level: str | None = None) -> JsonlHandler:
    """Route root-logger output to a JSONL file, replacing any previous sink.

    Args:
        path: Log file (default: $SASS_IMPORTER_LOG_PATH or ./sass-importer.log.jsonl)
        level: Level name (default: $SASS_IMPORTER_LOG_LEVEL or INFO)

    Returns:
        The installed handler
    """
    path = path or os.environ.get(LOG_PATH_ENV, "./sass-importer.log.jsonl")
    level = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
            h.close()

    handler = JsonlHandler(path)
    root.addHandler(handler)
    return handler
