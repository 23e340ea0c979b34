"""Logging setup shared by the fwgraph package and its command line.

Every module logs through ``get_logger(__name__)``, so all records flow into
the single ``"fwgraph"`` logger configured here. The engines report sizes and
timings at DEBUG; the CLI reports progress at INFO and picks the level from
its ``--verbose``/``--quiet`` flags via `verbosity_level`.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "fwgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    force: bool = False,
) -> logging.Logger:
    """Attach one formatted handler to the ``"fwgraph"`` logger.

    Does nothing when a handler is already attached, unless ``force`` is set,
    in which case existing handlers are replaced and the level is reapplied.

    Args:
        level: Logging level (default: INFO).
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to attach; defaults to a stdout StreamHandler.
        force: Replace any handler already attached.

    Returns:
        The ``"fwgraph"`` logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers and not force:
        return package_logger

    package_logger.handlers.clear()
    package_logger.setLevel(level)

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    package_logger.propagate = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that defers to the ``"fwgraph"`` level."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``"fwgraph"`` logger and of its handlers."""
    package_logger = setup_root_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def verbosity_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map command-line verbosity flags to a logging level.

    ``verbose`` wins over ``quiet``; with neither flag the level is INFO.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


setup_root_logger()
