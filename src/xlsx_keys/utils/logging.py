"""Diagnostic tracing for the extraction engine.

Loggers live under the ``xlsx_keys`` namespace and only ever write to
stderr, keeping stdout reserved for JSON output. Nothing is emitted unless
:func:`configure_logging` attaches a handler (the CLI does, at WARNING by
default and DEBUG with ``--verbose``).

Usage:
    from xlsx_keys.utils.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Accepted key", extra={"sheet": "Data", "cell": "B2"})
"""

import logging
import sys

ROOT_LOGGER = "xlsx_keys"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A standard library logger.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Repeated calls replace the level and keep one handler.

    Args:
        verbose: DEBUG when True, otherwise WARNING.

    Returns:
        The package root logger.
    """
    global _handler
    root = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    else:
        # sys.stderr may have been swapped since the last call
        _handler.setStream(sys.stderr)
    _handler.setLevel(level)
    root.setLevel(level)
    return root
