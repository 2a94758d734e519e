import logging

import pytest


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
