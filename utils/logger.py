"""Logging setup shared across the application."""
import logging
import sys
from app.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class AuditFormatter(logging.Formatter):
    """Formatter that appends structured audit fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        audit = getattr(record, "audit", None)
        if audit:
            fields = " ".join(f"{key}={value!r}" for key, value in audit.items())
            message = f"{message} | {fields}"
        return message


def setup_logger(name: str) -> logging.Logger:
    """
    Get a configured logger.

    Args:
        name: Logger name, usually the calling module's __name__

    Returns:
        Logger with a single stdout handler at the configured level
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.log_level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(AuditFormatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
        logger.addHandler(handler)

    return logger
