"""
Logging Configuration.

All modules obtain their logger through `get_logger(__name__)` so that the
output format is uniform across the library. Projection math itself never
logs on the per-point path; only construction, failures and batch runs do.
"""

import logging
import sys


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the projection library.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_level(level: int) -> None:
    """Change the level of every logger created by `get_logger`.

    Parameters
    ----------
    level : int
        New logging level (e.g. ``logging.DEBUG``).
    """
    for name in list(logging.root.manager.loggerDict):
        if name.split(".")[0] in ("common", "geospatial", "projections"):
            logging.getLogger(name).setLevel(level)
