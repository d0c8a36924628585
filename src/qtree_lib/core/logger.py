# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def _is_debug_mode() -> bool:
    return os.environ.get(CFG.env_vars.debug_mode) is not None


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a qtree logger writing to stderr through a RichHandler.

    Repeated calls for the same name reuse the attached handler and only
    refresh its level, so messages are never printed twice.

    Args:
        name (str): Name of the logger, usually `__name__`.
        show_time (bool): Print timestamps even outside of debug mode.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    level = logging.DEBUG if _is_debug_mode() else logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    handler = next(
        (h for h in logger.handlers if isinstance(h, RichHandler)), None
    )
    if handler is None:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            show_level=True,
            show_time=show_time or level == logging.DEBUG,
            log_time_format=CFG.date_formats.standard,
        )
        logger.addHandler(handler)

    handler.setLevel(level)
    return logger
