"""
Utility Functions
=================

Logging configuration for the sdf2mesh package.

Functions
---------
configure_logging
    Attach a console (and optional file) handler to the ``sdf2mesh`` logger.
"""

import logging

_PACKAGE_LOGGER = "sdf2mesh"


def configure_logging(level=logging.INFO, logfile=None):
    """Configure logging for the sdf2mesh package.

    The library itself never installs handlers; call this from scripts that
    want to see extraction summaries.  Handlers added by an earlier call are
    replaced, so calling it again does not duplicate output.

    Parameters
    ----------
    level : int, default logging.INFO
        Logging level (e.g., logging.DEBUG, logging.INFO, logging.WARNING).
    logfile : str, optional
        Path to log file. If provided, logs are written to both console
        and file. If None, logs only to console.

    Examples
    --------
    >>> import logging
    >>> from sdf2mesh.utils import configure_logging
    >>> configure_logging(level=logging.DEBUG)

    Notes
    -----
    The log format is: "HH:MM:SS message"
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, "_sdf2mesh", False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s %(message)s", datefmt="%H:%M:%S")
    logger_handler = logging.StreamHandler()
    logger_handler.setFormatter(formatter)
    logger_handler._sdf2mesh = True
    logger.addHandler(logger_handler)

    if logfile is not None:
        file_logger_handler = logging.FileHandler(logfile)
        file_logger_handler.setFormatter(formatter)
        file_logger_handler._sdf2mesh = True
        logger.addHandler(file_logger_handler)
    return logger
