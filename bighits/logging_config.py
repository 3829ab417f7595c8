"""
Logging Setup

Handlers for the `bighits` logger. Modules log through
`logging.getLogger(__name__)` and inherit whatever is configured here.
"""

import logging
import sys

LOGGER_NAME = 'bighits'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level):
    """Accept logging.DEBUG or 'debug'; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level=logging.INFO, log_file=None):
    """Attach stdout (and optionally file) handlers to the package logger.

    Safe to call once per app; create_app runs for every test.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug('Logging configured at %s', logging.getLevelName(level))
    return logger
