"""Logging setup for the vendor roster workers.

Workers log one JSON object per line. Each line carries the processing id
of the task being run, so a single creation can be followed end to end.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from .correlation import get_processing_id

# Optional attributes passed through `extra=` by the pipeline
EXTRA_FIELDS = ("vendor_id", "error_kind")

NOISY_LOGGERS = ("celery.worker.strategy", "kombu", "sqlalchemy.engine")

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(processing_id)s] %(name)s: %(message)s"


class ProcessingIDFilter(logging.Filter):
    """Stamp records with the current processing id (never drops a record)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.processing_id = get_processing_id()
        return True


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "processing_id": getattr(record, "processing_id", get_processing_id()),
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = str(value)

        if record.exc_info:
            payload["error"] = str(record.exc_info[1])
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Replace the root handlers with one stdout handler.

    Args:
        level: Level name such as "INFO" or "debug"
        json_format: JSON lines when True, a plain one-line format otherwise
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(ProcessingIDFilter())
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
