"""Logging helpers for consentdoc.

The library only emits records; it never configures handlers. All loggers
live under the ``consentdoc`` namespace, so applications can enable parser
diagnostics with a single call:

    >>> import logging
    >>> logging.getLogger("consentdoc").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "consentdoc"

# Records are dropped silently unless the application adds a handler
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the consentdoc namespace.

    Module names of the package are used as-is; any other name is nested
    under ``consentdoc.``.

    Example:
        >>> get_logger("consentdoc.parser").name
        'consentdoc.parser'
        >>> get_logger("forms").name
        'consentdoc.forms'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
