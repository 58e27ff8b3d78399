from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple, Union

# Individual xref -> surname. Filled while individuals are classified and
# only read once families are resolved.
SurnameIndex = Dict[str, str]

PLACEHOLDER_NAME = "?"
PLACEHOLDER_SPOUSE = "?"
SPOUSE_NO_TAG = "noTAG"
SPOUSE_NO_INDI = "noINDI"


@dataclass(frozen=True, slots=True)
class NameParts:
    """
    Result of decomposing a ``1 NAME`` value.

    ``recorded`` is False when no surname should enter the SurnameIndex
    (no NAME line, or a value with an unrecognized shape).
    """
    display_name: str = PLACEHOLDER_NAME
    given: str = ""
    surname: str = ""
    suffix: str = ""
    recorded: bool = False


@dataclass(frozen=True, slots=True)
class GeneralRecord:
    """SOUR records and everything unrecognized (HEAD, notes, repositories...)."""
    xref: str
    body: str


@dataclass(frozen=True, slots=True)
class Individual:
    xref: str
    body: str
    display_name: str = PLACEHOLDER_NAME
    given_name: str = ""
    surname: str = ""


@dataclass(frozen=True, slots=True)
class Family:
    """
    A FAM record. Spouse surnames stay ``"?"`` until the family has been
    through resolve_families().
    """
    xref: str
    body: str
    husband_surname: str = PLACEHOLDER_SPOUSE
    wife_surname: str = PLACEHOLDER_SPOUSE


AnyRecord = Union[Family, Individual, GeneralRecord]


@dataclass(frozen=True)
class ResultSet:
    """
    The four record collections produced by one successful parse.

    Collections are tuples in file order; sorting for display is left to
    gedcom_reader.sorting.
    """
    families: Tuple[Family, ...] = field(default_factory=tuple)
    individuals: Tuple[Individual, ...] = field(default_factory=tuple)
    sources: Tuple[GeneralRecord, ...] = field(default_factory=tuple)
    others: Tuple[GeneralRecord, ...] = field(default_factory=tuple)

    def counts(self) -> Dict[str, int]:
        return {
            "families": len(self.families),
            "individuals": len(self.individuals),
            "sources": len(self.sources),
            "others": len(self.others),
        }

    def __len__(self) -> int:
        return sum(self.counts().values())

    def iter_records(self) -> Iterator[AnyRecord]:
        """All records, bin by bin: families, individuals, sources, others."""
        yield from self.families
        yield from self.individuals
        yield from self.sources
        yield from self.others

    def find(self, xref: str) -> Optional[AnyRecord]:
        """First record carrying ``xref``, or None."""
        for record in self.iter_records():
            if record.xref == xref:
                return record
        return None
