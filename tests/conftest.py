import pytest
from loguru import logger
from ventemit.core.events import EventRegistry
from ventemit.core.config import ConfigManager


@pytest.fixture
def registry():
    """A fresh EventRegistry for each test."""
    return EventRegistry("test")


@pytest.fixture
def config_manager(tmp_path, registry):
    """ConfigManager persisting to a temp directory and dispatching on `registry`."""
    return ConfigManager(str(tmp_path / "config.json"), registry=registry)


@pytest.fixture
def caplog_loguru():
    """Collect loguru messages, since caplog only sees stdlib logging."""
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(sink_id)
