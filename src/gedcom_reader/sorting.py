"""
Display ordering for record lists.

Parsing keeps file order; the CLI sorts for display with a natural,
case-insensitive comparison so that ``I2`` comes before ``I10``.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple, TypeVar

from gedcom_reader.records.models import Individual

T = TypeVar("T")

_DIGITS_RE = re.compile(r"(\d+)")

INDIVIDUAL_SORT_KEYS = ("xref", "name")


def natural_key(value: str) -> Tuple[Tuple[int, object], ...]:
    """
    Sort key comparing digit runs numerically and text case-insensitively.

        sorted(["I10", "I2", "i3"], key=natural_key) -> ["I2", "i3", "I10"]
    """
    key = []
    for piece in _DIGITS_RE.split(value):
        if not piece:
            continue
        if piece.isdigit():
            key.append((0, int(piece)))
        else:
            key.append((1, piece.casefold()))
    return tuple(key)


def sort_records(records: Iterable[T]) -> List[T]:
    """Sort any records carrying an ``xref`` by natural xref order."""
    return sorted(records, key=lambda r: natural_key(r.xref))  # type: ignore[attr-defined]


def sort_individuals(individuals: Iterable[Individual], by: str = "xref") -> List[Individual]:
    """Sort individuals by ``xref`` or by surname-first ``name``."""
    if by == "xref":
        return sort_records(individuals)
    if by == "name":
        return sorted(
            individuals,
            key=lambda ind: (natural_key(ind.display_name), natural_key(ind.xref)),
        )
    raise ValueError(f"Unknown individual sort key {by!r}; expected one of {INDIVIDUAL_SORT_KEYS}")
