import json
import logging
import sys
import time

from .config import config

SERVICE_NAME = "loigen"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line, tagged with service/env for grepping batch runs."""

    def format(self, record):
        payload = {
            "ts": time.time(),
            "service": SERVICE_NAME,
            "env": config.ENV,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # attach contextual info if provided
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            payload.update(ctx)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        # numpy / pandas scalars from row counts and cells aren't JSON-native
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    # stderr, so CLI output (tables, letters) can be piped cleanly
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL)
        logger.propagate = False
    return logger
