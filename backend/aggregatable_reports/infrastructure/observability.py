"""Structured Logging: one JSON object per line, tagged with report conversion context.

Invariants:
    - Every line carries timestamp (the record's own creation time, UTC), level, logger,
      service and message
    - Report context extras (REPORT_EXTRAS) appear only when set on the record
    - setup_logging owns at most one root handler; calling it again replaces that handler
"""

import json
import logging
from datetime import datetime, timezone


SERVICE_NAME = "aggregatable-reports"

REPORT_EXTRAS: tuple[str, ...] = (
    "report_id", "protocol", "channel", "payload_count",
    "payload_index", "error_code", "path",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(report_id)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single-line JSON object."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key])
            for key in REPORT_EXTRAS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception_type"] = record.exc_info[0].__name__
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _ReportIdDefault(logging.Filter):
    """Give records without a report_id a "-" placeholder for TEXT_FORMAT."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "report_id", None) is None:
            record.report_id = "-"
        return True


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the root handler (JSON or text) and set the root level."""
    for existing in list(logging.root.handlers):
        if getattr(existing, "_aggregatable_reports", False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._aggregatable_reports = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.addFilter(_ReportIdDefault())
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
