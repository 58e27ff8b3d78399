"""
names.py
Personal-name extraction for INDI records.

Only the first ``1 NAME`` line of a record is used. Its value is split on the
surname delimiter ``/`` (empty pieces dropped) and rearranged surname-first
for list display:

    "John /Smith/"       -> "Smith John "        surname "Smith"
    "John /Smith/ Jr."   -> "Smith John  Jr."    surname "Smith"
    "Madonna"            -> "? Madonna"          surname "?"
    "/Smith/"            -> "Smith ?"            surname "Smith"

Pieces are kept verbatim, so the spaces around the delimiters survive into
the display name.
"""

from __future__ import annotations

from typing import Optional

from gedcom_reader.records.models import PLACEHOLDER_NAME, NameParts
from gedcom_reader.records.utils import rest_of_line

NAME_TAG = "1 NAME "
SURNAME_DELIMITER = "/"


def find_name_value(body: str) -> Optional[str]:
    return rest_of_line(body, NAME_TAG)


def split_name_value(value: str) -> NameParts:
    """Decompose a NAME value into display name and surname."""
    parts = [p for p in value.split(SURNAME_DELIMITER) if p]

    if len(parts) == 1:
        (only,) = parts
        if len(only) == len(value):
            # No delimiter at all: the whole value is a given name.
            return NameParts(
                display_name=f"{PLACEHOLDER_NAME} {only}",
                given=only,
                surname=PLACEHOLDER_NAME,
                recorded=True,
            )
        # Delimiters present but only one piece survived: surname only.
        return NameParts(
            display_name=f"{only} {PLACEHOLDER_NAME}",
            surname=only,
            recorded=True,
        )

    if len(parts) == 2:
        given, surname = parts
        return NameParts(
            display_name=f"{surname} {given}",
            given=given,
            surname=surname,
            recorded=True,
        )

    if len(parts) == 3:
        given, surname, suffix = parts
        return NameParts(
            display_name=f"{surname} {given}{suffix}",
            given=given,
            surname=surname,
            suffix=suffix,
            recorded=True,
        )

    return NameParts()


def normalize_name(body: str) -> NameParts:
    """Name parts for an INDI body; placeholder parts when there is no NAME line."""
    value = find_name_value(body)
    if value is None:
        return NameParts()
    return split_name_value(value)
