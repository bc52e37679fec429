import logging

import pytest

from lazyseq.logger import DEFAULT_LOGGER_NAME


@pytest.fixture
def log_capture(caplog):
    """
    The library loggers do not propagate to the root logger, so caplog's handler is attached to
    them directly. Call the fixture with a logger name, it returns caplog.
    """
    attached = []

    def attach(name=DEFAULT_LOGGER_NAME, level=logging.DEBUG):
        logger = logging.getLogger(name)
        logger.addHandler(caplog.handler)
        caplog.handler.setLevel(level)
        attached.append(logger)
        return caplog

    yield attach
    for logger in attached:
        logger.removeHandler(caplog.handler)
