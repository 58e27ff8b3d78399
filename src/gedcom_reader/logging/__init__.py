"""
Logging package for ``gedcom_reader``.

Modules call ``get_logger("<short name>")``; every logger returned is a child
of the ``gedcom_reader`` base logger.
"""

from .logger import (
    configure_logging,
    get_logger,
    list_active_loggers,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "list_active_loggers",
]
