"""Logging setup shared by the txgraph modules and the CLI."""
import logging
import sys
from typing import Optional

_PACKAGE_LOGGER = 'txgraph'

_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Get a logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging for the package. Call once at startup.

    Args:
        verbose: If True, show INFO/DEBUG messages. If False, only WARNING+.
        log_file: Optional path to a log file, written in addition to stderr.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    formatter = logging.Formatter(_FORMAT, datefmt='%H:%M:%S')
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)

    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    # reconfiguring replaces earlier handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
