"""Logging setup for the ``fars`` logger hierarchy, with an optional JSON formatter."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

from ..config import get_log_level

PACKAGE_LOGGER = "fars"
PLAIN_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName", "asctime",
})


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs (``year``, ``state``, ``path`` ...) directly
    into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        return json.dumps(payload, default=str)


class PackageStreamHandler(logging.StreamHandler):
    """Stream handler installed by ``setup_logging``; replaced on the next call."""


def setup_logging(
    level: Optional[int] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a single stream handler to the ``fars`` logger.

    Library modules only call ``logging.getLogger(__name__)``; nothing is
    configured on import.  Calling this again replaces the handler installed
    by the previous call instead of stacking a second one.

    Args:
        level: Logging level.  Defaults to ``FARS_LOG_LEVEL`` (``INFO``).
        json_format: Use ``JsonFormatter`` instead of the plain text format.
        stream: Output stream (default: ``sys.stderr``).

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(get_log_level() if level is None else level)

    for handler in list(logger.handlers):
        if isinstance(handler, PackageStreamHandler):
            logger.removeHandler(handler)

    handler = PackageStreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    logger.addHandler(handler)
    return logger
