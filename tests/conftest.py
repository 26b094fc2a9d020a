"""Shared fixtures for sanitization tests."""
import logging
import pytest
from app.config import Settings
from services.sanitization_service import InputSanitizationService


@pytest.fixture
def audit_logger():
    """Dedicated logger so caplog can filter audit events by name."""
    return logging.getLogger("tests.audit")


@pytest.fixture
def sanitizer(audit_logger, caplog):
    """Sanitizer with default settings, capturing INFO and above."""
    caplog.set_level(logging.INFO, logger=audit_logger.name)
    return InputSanitizationService(audit_logger=audit_logger, config=Settings())


@pytest.fixture
def audit_records(caplog, audit_logger):
    """Return the audit events emitted so far."""
    def _records(level=None):
        return [
            r for r in caplog.records
            if r.name == audit_logger.name and (level is None or r.levelno == level)
        ]
    return _records
