from __future__ import annotations

import logging

import pytest

from hashed_assets.log_setup import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    # CLI tests attach handlers bound to captured streams; drop them afterwards.
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
