import pytest
import sys
import os
from loguru import logger

# Ensure typed_event is importable without installation
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

@pytest.fixture
def caplog(caplog):
    """
    Route loguru records into pytest's caplog.
    """
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)
