"""
Logging Configuration.

Every module obtains its logger through `get_logger(__name__)`. A single
stdout handler lives on the package root logger ("coordinate_transformer");
module loggers propagate to it, so a caller can silence or redirect the
whole library with one call to `set_log_level` or by replacing that handler.
"""

import logging
import sys

PACKAGE_LOGGER_NAME = "coordinate_transformer"

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    return root


def get_logger(name: str, level: int = logging.NOTSET) -> logging.Logger:
    """Get a logger configured for the coordinate transformer.

    Parameters
    ----------
    name : str
        Logger name (typically __name__). Names outside the package are
        re-rooted under it so they share its handler.
    level : int
        Logging level. NOTSET defers to the package root logger.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    _package_logger()

    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger


def set_log_level(level: int) -> None:
    """Set the level of the package root logger.

    Parameters
    ----------
    level : int
        New logging level, e.g. `logging.DEBUG` to see clamping events.
    """
    _package_logger().setLevel(level)
