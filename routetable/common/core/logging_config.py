"""
Logging Configuration

Provides:
- CustomJsonFormatter: renders each record as one JSON line, so route load
  events (fallback, route loaded, element failures) stay machine-filterable
- setup_logging: dictConfig from a YAML file with ${VAR} substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import yaml

# Attributes every LogRecord carries; anything else was passed via `extra`.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class CustomJsonFormatter(logging.Formatter):
    """
    JSON line formatter.

    Output keys: `_time` (UTC, millisecond ISO8601), `level`, `logger`,
    `message`, then the record's `extra` fields (e.g. `channel` and
    `transaction` on "ROUTE LOADED" lines) and `exception` when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "_time": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extra_fields(record))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(config_path: str = "logging.yml", level: Optional[str] = None):
    """
    Configure logging from a YAML dictConfig file.

    ${LOG_LEVEL} and other environment references in the file are expanded
    first. Without a config file, plain basicConfig at `level` is used.
    """
    level = level or os.environ.get("LOG_LEVEL", "INFO")

    if not os.path.exists(config_path):
        logging.basicConfig(level=level)
        return

    with open(config_path, "r", encoding="utf-8") as f:
        template = string.Template(f.read())

    mapping = dict(os.environ)
    mapping.setdefault("LOG_LEVEL", level)
    logging.config.dictConfig(yaml.safe_load(template.safe_substitute(mapping)))
