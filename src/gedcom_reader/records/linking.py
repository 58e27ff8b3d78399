from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, List, Mapping

from gedcom_reader.logger import get_logger
from gedcom_reader.records.models import SPOUSE_NO_INDI, SPOUSE_NO_TAG, Family
from gedcom_reader.records.utils import pointer_target, rest_of_line

log = get_logger("linking")

HUSBAND_TAG = "1 HUSB "
WIFE_TAG = "1 WIFE "


def spouse_surname(body: str, tag: str, surnames: Mapping[str, str]) -> str:
    """
    Surname of the spouse referenced by the first ``tag`` line of a FAM body.

    Returns ``"noTAG"`` when there is no such line (or it carries no pointer)
    and ``"noINDI"`` when the pointer names no indexed individual.
    """
    value = rest_of_line(body, tag)
    if value is None:
        return SPOUSE_NO_TAG
    xref = pointer_target(value)
    if xref is None:
        return SPOUSE_NO_TAG
    return surnames.get(xref, SPOUSE_NO_INDI)


def resolve_family(family: Family, surnames: Mapping[str, str]) -> Family:
    return replace(
        family,
        husband_surname=spouse_surname(family.body, HUSBAND_TAG, surnames),
        wife_surname=spouse_surname(family.body, WIFE_TAG, surnames),
    )


def resolve_families(
    families: Iterable[Family],
    surnames: Mapping[str, str],
) -> List[Family]:
    """
    Second pass: annotate every family with its spouses' surnames.

    Must run after all individuals have been indexed. The index is wrapped
    read-only for the duration of the pass.
    """
    frozen = MappingProxyType(dict(surnames))
    resolved = [resolve_family(fam, frozen) for fam in families]

    unresolved = sum(
        1
        for fam in resolved
        if SPOUSE_NO_INDI in (fam.husband_surname, fam.wife_surname)
    )
    if unresolved:
        log.info("%d families reference individuals with no indexed surname", unresolved)
    return resolved
