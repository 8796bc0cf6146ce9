# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from . import config

PACKAGE_LOGGER = "flattener"


def setup_logging(log_file: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Attach a rotating file handler to the package logger.

    Nothing is attached unless a log file is given or FLATTEN_LOG_FILE is set,
    so a default run stays silent.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if getattr(setup_logging, "_configured", False):
        return logger

    log_file = log_file or config.log_file()
    if log_file is None:
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.setLevel(getattr(logging, level or config.log_level(), logging.INFO))
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
        errors="backslashreplace",
    )
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    setup_logging._configured = True
    return logger
