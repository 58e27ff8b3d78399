"""
gedcom_reader
Split GEDCOM text into family, individual, source and other records, with
surname-first display names and spouse surnames resolved on families.

    from gedcom_reader import parse_text

    result = parse_text(text)
    for fam in result.families:
        print(fam.xref, fam.husband_surname, fam.wife_surname)
"""

from gedcom_reader.core.exceptions import (
    MalformedHeader,
    MalformedRecordBoundary,
    PipelineError,
    ProcessingError,
    UnreadableBody,
)
from gedcom_reader.parser_core import GEDCOMReader, parse_text
from gedcom_reader.records.models import Family, GeneralRecord, Individual, ResultSet

__version__ = "0.1.0"

__all__ = [
    "Family",
    "GEDCOMReader",
    "GeneralRecord",
    "Individual",
    "MalformedHeader",
    "MalformedRecordBoundary",
    "PipelineError",
    "ProcessingError",
    "ResultSet",
    "UnreadableBody",
    "parse_text",
]
