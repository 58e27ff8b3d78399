from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from gedcom_reader.loader.splitter import RawRecord
from gedcom_reader.logger import get_logger
from gedcom_reader.records.models import (
    Family,
    GeneralRecord,
    Individual,
    SurnameIndex,
)
from gedcom_reader.records.names import normalize_name

log = get_logger("classifier")

FAMILY_PREFIX = "F"
INDIVIDUAL_PREFIX = "I"
SOURCE_PREFIX = "S"


@dataclass
class RecordBins:
    """
    Mutable staging area for one parse.

    Lives only inside parse_text(); the published ResultSet is built from it
    once every record has been classified.
    """
    families: List[Family] = field(default_factory=list)
    individuals: List[Individual] = field(default_factory=list)
    sources: List[GeneralRecord] = field(default_factory=list)
    others: List[GeneralRecord] = field(default_factory=list)
    surnames: SurnameIndex = field(default_factory=dict)


def build_individual(record: RawRecord, surnames: SurnameIndex) -> Individual:
    """
    Build an Individual from an INDI record and index its surname.

    The SurnameIndex only gains an entry when the NAME value had a
    recognized shape.
    """
    parts = normalize_name(record.body)
    if parts.recorded:
        surnames[record.xref] = parts.surname
    return Individual(
        xref=record.xref,
        body=record.body,
        display_name=parts.display_name,
        given_name=parts.given,
        surname=parts.surname,
    )


def classify(record: RawRecord, bins: RecordBins) -> None:
    """
    Append ``record`` to exactly one bin, chosen by the first character of
    its xref. Unknown prefixes, the HEAD sentinel included, go to others.
    """
    kind = record.kind
    if kind == FAMILY_PREFIX:
        bins.families.append(Family(xref=record.xref, body=record.body))
    elif kind == INDIVIDUAL_PREFIX:
        bins.individuals.append(build_individual(record, bins.surnames))
    elif kind == SOURCE_PREFIX:
        bins.sources.append(GeneralRecord(xref=record.xref, body=record.body))
    else:
        bins.others.append(GeneralRecord(xref=record.xref, body=record.body))
    log.debug("Classified %s as %r", record.xref, kind or "?")


def classify_all(records: Iterable[RawRecord]) -> RecordBins:
    bins = RecordBins()
    for record in records:
        classify(record, bins)
    return bins
