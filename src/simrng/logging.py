"""
Logging configuration for applications embedding simrng.

The library itself only creates module loggers; :func:`setup` is opt-in.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import copy
import logging
import logging.config
from logging import LogRecord
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class AppFilter(logging.Filter):
    """Expose the module file stem to the pretty formatter."""

    def filter(self, record: LogRecord) -> bool:
        record.filenameStem = Path(record.filename).stem
        return True


def rich_handler_factory() -> RichHandler:
    return RichHandler(
        console=Console(width=160, stderr=True),
        rich_tracebacks=True,
        markup=True,
    )


LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "appfilter": {
            "()": AppFilter,
        }
    },
    "formatters": {
        "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        "pretty": {"format": "[[yellow]%(filenameStem)s[/]] %(message)s"},
    },
    "handlers": {
        "default": {
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
        "rich": {
            "()": rich_handler_factory,
            "formatter": "pretty",
            "filters": ["appfilter"],
        },
    },
    "loggers": {
        "simrng": {
            "handlers": ["rich"],
            "level": "INFO",
            "propagate": False,
        },
    },
}


def setup(level: int | str | None = None, *, pretty: bool = True) -> None:
    """
    Initialize logging for the ``simrng`` logger hierarchy.

    Parameters
    ----------
    level : int or str, optional
        Overrides the configured level of the ``simrng`` logger.
    pretty : bool, default=True
        Use the rich handler; otherwise the plain stream handler.
    """
    config: dict[str, Any] = copy.deepcopy(LOGGING_CONFIG)
    logger_config = config["loggers"]["simrng"]
    logger_config["handlers"] = ["rich"] if pretty else ["default"]
    if level is not None:
        logger_config["level"] = level
    logging.config.dictConfig(config)


__all__ = ("setup",)
