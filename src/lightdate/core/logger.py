"""Logging setup shared by all lightdate modules."""

import logging
import sys
from typing import Union


def get_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Get a logger under the `lightdate.` namespace with one stdout handler."""
    logger = logging.getLogger(f"lightdate.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def set_level(level: Union[int, str]) -> None:
    """Change the level of every logger already created under `lightdate.`."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("lightdate").setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("lightdate.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
