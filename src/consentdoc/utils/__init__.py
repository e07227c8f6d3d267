"""Utility modules for consentdoc.

Provides:
- logger: get_logger for namespaced stdlib loggers
"""

from consentdoc.utils.logger import get_logger

__all__ = [
    "get_logger",
]
