"""
Short import path for the logging package:

    from gedcom_reader.logger import get_logger
"""

from gedcom_reader.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
