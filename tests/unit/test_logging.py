from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pytest
from rich.logging import RichHandler

from simrng import logging as simrng_logging


@pytest.fixture
def restore_simrng_logger():
    logger = logging.getLogger("simrng")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_pretty_setup_uses_rich(restore_simrng_logger) -> None:
    simrng_logging.setup()

    logger = restore_simrng_logger
    assert any(isinstance(h, RichHandler) for h in logger.handlers)
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_plain_setup_with_level(restore_simrng_logger) -> None:
    simrng_logging.setup("DEBUG", pretty=False)

    logger = restore_simrng_logger
    assert logger.level == logging.DEBUG
    assert not any(isinstance(h, RichHandler) for h in logger.handlers)
    assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)


def test_setup_does_not_mutate_default_config(restore_simrng_logger) -> None:
    simrng_logging.setup("WARNING", pretty=False)

    assert simrng_logging.LOGGING_CONFIG["loggers"]["simrng"]["level"] == "INFO"
    assert simrng_logging.LOGGING_CONFIG["loggers"]["simrng"]["handlers"] == ["rich"]


def test_app_filter_sets_file_stem() -> None:
    record = logging.LogRecord("simrng", logging.INFO, "/a/b/service.py", 1, "msg", None, None)
    assert simrng_logging.AppFilter().filter(record)
    assert record.filenameStem == "service"
