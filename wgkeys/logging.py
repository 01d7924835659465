"""Logging configuration for wgkeys.

Records pass through :class:`KeyMaterialFilter` before they are formatted, so
a secret key or a raw byte buffer passed as a log argument is never written
out.
"""

import json
import logging
import sys

from wgkeys.config import get_settings
from wgkeys.keys import SecretKey


def _scrub(value):
    if isinstance(value, SecretKey):
        return repr(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"<{len(value)} bytes>"
    return value


class KeyMaterialFilter(logging.Filter):
    """Replace secret keys and raw buffers in record arguments."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, dict):
            record.args = {k: _scrub(v) for k, v in record.args.items()}
        elif record.args:
            record.args = tuple(_scrub(arg) for arg in record.args)
        return True


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        base = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def setup_logging() -> None:
    """Configure the root logger: JSON in prod, text in dev, level from settings."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(KeyMaterialFilter())

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())
