"""Logging helpers for Stylemark.

All loggers live under the ``stylemark`` namespace so applications can
tune the whole package with one ``logging.getLogger("stylemark")`` call.
Nothing is configured here; handlers are left to the application.

Example:
    >>> from stylemark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Ignoring unknown directive %r", "sparkle")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylemark.errors import DirectiveDiagnostic

PACKAGE_LOGGER = "stylemark"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the stylemark namespace.

    Example:
        >>> get_logger("mymodule").name
        'stylemark.mymodule'
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def log_diagnostic(
    logger: logging.Logger,
    diagnostic: DirectiveDiagnostic,
    level: int = logging.WARNING,
) -> None:
    """Log a directive diagnostic, attaching it to the record as ``diagnostic``."""
    logger.log(level, "%s", diagnostic, extra={"diagnostic": diagnostic})
