import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop sinks added during a test and put the package back to silent."""
    yield
    logger.remove()
    logger.disable("pocketcalc")


@pytest.fixture
def log_messages():
    """Collect loguru records emitted by the package during the test."""
    messages = []
    logger.enable("pocketcalc")
    handler_id = logger.add(lambda msg: messages.append(msg.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
