# tests/conftest.py
import logging

import pytest

from dispatchdemo.core import log
from dispatchdemo.core import metrics


@pytest.fixture(scope="session", autouse=True)
def _bootstrap_logging():
    # Setup logging (reads LOG_LEVEL / LOG_JSON / .env if available)
    log.setup()
    yield


@pytest.fixture(autouse=True)
def _fresh_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def fresh_logging():
    """Let a test call log.setup(force=True); put the session handlers back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    metrics_level = logging.getLogger("metrics").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("metrics").setLevel(metrics_level)
