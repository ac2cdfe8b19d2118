"""Test fixtures."""
import logging
import sys

import pytest

from namedchains.testing.random_chain import RandomChainGenerator


@pytest.fixture(scope="session")
def logger(request) -> logging.Logger:
    """Initialize stdout logger using colored output."""

    logger = logging.getLogger()

    # pytest --log-level option
    log_level = request.config.getoption("--log-level") or "INFO"

    # Set log format to dislay the logger name to hunt down verbose logging modules
    fmt = "%(name)-25s %(levelname)-8s %(message)s"

    # Use colored logging output for console
    try:
        import coloredlogs
        coloredlogs.install(level=log_level, fmt=fmt, logger=logger)
    except ImportError:
        logging.basicConfig(stream=sys.stdout, level=log_level)

    return logger


@pytest.fixture()
def random_chains() -> RandomChainGenerator:
    """Seeded so that failures can be reproduced."""
    return RandomChainGenerator(seed=0x1337)
