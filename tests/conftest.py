import logging

import pytest

from patterncatalog.config.schemas import AppConfig, LoggingConfig
from patterncatalog.infrastructure.logging.logger import setup_logging
from patterncatalog.infrastructure.output import TranscriptOutput


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Route structlog through stdlib and keep test output quiet."""
    setup_logging(LoggingConfig(level="WARNING", destination="stdout"))
    yield
    logging.getLogger().handlers.clear()


@pytest.fixture
def transcript():
    return TranscriptOutput()


@pytest.fixture
def app_config():
    return AppConfig()
