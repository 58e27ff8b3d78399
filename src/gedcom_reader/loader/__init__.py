# src/gedcom_reader/loader/__init__.py

"""
Text-level loading: read a file into a string and split it into records.

    from gedcom_reader.loader import (
        LoadedText,
        RawRecord,
        TextCursor,
        iter_records,
        read_gedcom_text,
        split_records,
    )
"""

from __future__ import annotations

from .cursor import TextCursor
from .file_loader import LoadedText, read_gedcom_text
from .splitter import RawRecord, iter_records, split_records

__all__ = [
    "LoadedText",
    "RawRecord",
    "TextCursor",
    "iter_records",
    "read_gedcom_text",
    "split_records",
]
