"""
Logging configuration for the Order Management API.

``configure_logging`` attaches handlers to the ``order_management_api``
package logger, so every module logger created with
``logging.getLogger(__name__)`` inside the package shares them while
uvicorn keeps control of its own loggers.  Records still propagate to
the root logger.  Handlers are named; calling the function again (for
example when ``create_app`` is invoked once per test) replaces them
instead of stacking duplicates.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "order_management_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONSOLE_HANDLER = "order_management_api.console"
_FILE_HANDLER = "order_management_api.file"


def _replace_handler(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    for existing in [h for h in logger.handlers if h.get_name() == name]:
        logger.removeHandler(existing)
        existing.close()
    handler.set_name(name)
    logger.addHandler(handler)


def configure_logging(config: Settings) -> logging.Logger:
    """Configure the package logger from ``config`` and return it.

    ``config.log_level`` is a level name such as ``"debug"``; unknown
    names fall back to ``INFO``.  When ``config.log_file`` is set, log
    lines are also appended to that file; otherwise any file handler
    from an earlier call is removed.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    _replace_handler(logger, console_handler, _CONSOLE_HANDLER)

    if config.log_file:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        _replace_handler(logger, file_handler, _FILE_HANDLER)
    else:
        for stale in [h for h in logger.handlers if h.get_name() == _FILE_HANDLER]:
            logger.removeHandler(stale)
            stale.close()

    return logger
