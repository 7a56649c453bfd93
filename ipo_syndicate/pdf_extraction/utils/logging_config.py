"""
Logging Setup
-------------
Colored console logging (and optional file logging) for callers of the engine.
Library modules only create loggers; handlers are installed here on request.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import colorlog

from ... import settings


def configure_logging(level: Union[int, str] = None,
                      log_file: Optional[Union[str, Path]] = None,
                      logger_name: str = 'ipo_syndicate') -> logging.Logger:
    """
    Set up logging for the syndicate extraction package.

    Args:
        level: Log level name or number, defaults to settings.LOG_LEVEL
        log_file: Optional path of a file to also write logs to
        logger_name: Logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level or settings.LOG_LEVEL)

    # Remove any existing handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        '%(log_color)s' + settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        log_colors=settings.LOG_COLORS
    ))
    logger.addHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
