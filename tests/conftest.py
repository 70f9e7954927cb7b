import pytest

from primitive_calculator.common.logger import logger


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by main() so they never outlive the captured streams of one test."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel("NOTSET")
