from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logger(
    name: str, log_file: Path, level: int = logging.INFO
) -> logging.Logger:
    """Return a logger for ``name`` writing to ``log_file``.

    A handler for the same file is only ever attached once.
    """

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    if not any(
        isinstance(handler, logging.FileHandler)
        and handler.baseFilename == os.path.abspath(log_file)
        for handler in logger.handlers
    ):
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
