#!/usr/bin/env python3
"""
Structured logging setup.

Two output formats: JSON (default) and plain text, selected through the
LOG_FORMAT setting; LOG_LEVEL controls the root level.
"""
import json
import logging
import sys
from typing import Any, Dict, Optional

from tasklist.settings import AppSettings, get_settings

_RESERVED_ATTRS = frozenset(
    {
        "args",
        "msg",
        "levelno",
        "levelname",
        "name",
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
    }
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # fields passed through `extra=`
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(settings: Optional[AppSettings] = None) -> None:
    settings = settings or get_settings()
    root = logging.getLogger()
    # drop existing handlers so repeated setup does not duplicate output
    for h in list(root.handlers):
        root.removeHandler(h)

    level_name = str(settings.log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    handler = logging.StreamHandler(sys.stdout)

    if str(settings.log_format).lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s"))

    root.addHandler(handler)
