"""Package logger for crazylambdas.

Records carry the thread name, since most of what gets logged happens inside
threads spawned by :mod:`crazylambdas.execution`. Level and format default to
``settings.log_level`` and ``settings.log_format``
(``CRAZYLAMBDAS_LOG_LEVEL`` / ``CRAZYLAMBDAS_LOG_FORMAT``).
"""

import logging
import sys

from crazylambdas.core.config import settings

__all__ = ["logger", "setup_logger", "PackageHandler"]

PACKAGE_LOGGER = "crazylambdas"


class PackageHandler(logging.StreamHandler):
    """Stdout handler installed by :func:`setup_logger`."""

    def __init__(self):
        super().__init__(sys.stdout)


def _package_handler(logger: logging.Logger) -> PackageHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, PackageHandler):
            return handler
    return None


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the named logger and set its level.

    Child loggers such as ``crazylambdas.execution`` reach the handler through
    the logging hierarchy. Calling this again reuses the existing handler and
    only updates its level and format.

    Args:
        name: Logger name.
        level: Log level name, case-insensitive. Defaults to ``settings.log_level``.
        format_string: ``logging.Formatter`` format. Defaults to ``settings.log_format``.

    Returns:
        The configured logger.
    """
    level = (level or settings.log_level).upper()
    format_string = format_string or settings.log_format

    logger = logging.getLogger(name)

    handler = _package_handler(logger)
    if handler is None:
        handler = PackageHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.setLevel(getattr(logging, level))
    logger.propagate = False

    return logger


logger = setup_logger()
