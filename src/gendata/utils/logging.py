"""Centralized logger factory for gendata modules."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a configured logger.

    Parameters
    ----------
    name : str
        Logger name, usually ``f"{__name__}.{self.__class__.__name__}"``.
    verbose : bool, optional
        If True, log at DEBUG level. Otherwise a logger that has no level yet gets
        WARNING, and a level raised by an earlier verbose caller is left alone.

    Returns
    -------
    logging.Logger
        Logger with a single stream handler attached.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)
    return logger
