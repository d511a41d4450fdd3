import pytest

from ccshape.logger import ShapeLogger, set_logger


@pytest.fixture(autouse=True)
def shape_logger() -> ShapeLogger:
    """Fresh quiet global logger for every test."""
    logger = ShapeLogger(verbose=False)
    set_logger(logger)
    yield logger
    set_logger(None)
