"""
Record layer: typed records, classification into bins, name extraction and
family-to-individual surname resolution.
"""

from gedcom_reader.records.classifier import RecordBins, classify, classify_all
from gedcom_reader.records.linking import resolve_families
from gedcom_reader.records.models import (
    Family,
    GeneralRecord,
    Individual,
    NameParts,
    ResultSet,
    SurnameIndex,
)
from gedcom_reader.records.names import normalize_name, split_name_value

__all__ = [
    "Family",
    "GeneralRecord",
    "Individual",
    "NameParts",
    "RecordBins",
    "ResultSet",
    "SurnameIndex",
    "classify",
    "classify_all",
    "normalize_name",
    "resolve_families",
    "split_name_value",
]
