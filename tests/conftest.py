"""
Pytest configuration and fixtures for clientinfo tests
"""
import logging
import uuid

import pytest

from clientinfo.logging import disable_logging


class CollectingHandler(logging.Handler):
    """Handler that keeps every record it is given"""
    
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []
    
    def emit(self, record):
        self.records.append(record)
    
    @property
    def last(self):
        return self.records[-1] if self.records else None


@pytest.fixture
def log_capture():
    """
    Build an isolated logger whose handler runs the given enrichers.
    
    Usage:
        logger, handler = log_capture(ClientIpEnricher())
    """
    created = []
    
    def factory(*enrichers):
        logger = logging.getLogger(f"tests.capture.{uuid.uuid4().hex[:8]}")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = CollectingHandler()
        for enricher in enrichers:
            handler.addFilter(enricher)
        logger.addHandler(handler)
        created.append((logger, handler))
        return logger, handler
    
    yield factory
    
    for logger, handler in created:
        logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def reset_library_logging():
    """Reset clientinfo logging state around every test"""
    disable_logging()
    yield
    disable_logging()
