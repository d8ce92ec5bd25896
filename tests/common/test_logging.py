from __future__ import annotations

import logging

import pytest

from lotwise.common.logging import NOISY_LOGGERS, configure_logging


@pytest.fixture(autouse=True)
def restore_logger_levels() -> object:
    loggers = [logging.getLogger(), *(logging.getLogger(name) for name in NOISY_LOGGERS)]
    levels = [logger.level for logger in loggers]
    yield
    for logger, level in zip(loggers, levels, strict=True):
        logger.setLevel(level)


def test_configure_logging_quiets_http_stack_outside_debug() -> None:
    configure_logging(level=logging.INFO, force=True)

    assert logging.getLogger().level == logging.INFO
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_configure_logging_keeps_http_stack_in_debug() -> None:
    logging.getLogger("httpx").setLevel(logging.NOTSET)

    configure_logging(level=logging.DEBUG, force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.NOTSET
