# tests/conftest.py
from unittest.mock import MagicMock

import pytest
from loguru import logger

from hello_lambda.application.services.logger_service import LoggerService


@pytest.fixture
def log_records():
    """Collect loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="TRACE", format="{message}")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerService)
