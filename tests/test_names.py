# tests/test_names.py

from __future__ import annotations

import pytest

from gedcom_reader.records.names import find_name_value, normalize_name, split_name_value


def test_given_and_surname() -> None:
    """A given name plus /Surname/ displays surname first; the given name keeps its trailing space."""
    parts = split_name_value("John /Smith/")
    assert parts.display_name == "Smith John "
    assert parts.surname == "Smith"
    assert parts.given == "John "
    assert parts.recorded


def test_suffix_is_concatenated_without_space() -> None:
    """The suffix is appended to the given name with no added space."""
    parts = split_name_value("John /Smith/Jr.")
    assert parts.display_name == "Smith John Jr."
    assert parts.suffix == "Jr."
    assert parts.surname == "Smith"


def test_suffix_keeps_its_own_leading_space() -> None:
    assert split_name_value("Robert /Brown/ Jr.").display_name == "Brown Robert  Jr."


def test_no_delimiter_is_given_name_only() -> None:
    """A value without "/" is a given name with an unknown surname."""
    parts = split_name_value("Madonna")
    assert parts.display_name == "? Madonna"
    assert parts.surname == "?"
    assert parts.recorded


def test_surname_only() -> None:
    """Only an enclosed surname gives "Surname ?"."""
    parts = split_name_value("/Smith/")
    assert parts.display_name == "Smith ?"
    assert parts.surname == "Smith"
    assert parts.recorded


def test_empty_enclosed_surname_treats_given_as_surname() -> None:
    """With "//" the lone remaining piece is treated as the surname."""
    parts = split_name_value("John //")
    assert parts.display_name == "John  ?"
    assert parts.surname == "John "


@pytest.mark.parametrize("value", ["", "/", "a/b/c/d", "a /b/ c/d/"])
def test_unrecognized_shapes_stay_placeholder(value: str) -> None:
    """Empty values and four or more pieces keep the "?" placeholder."""
    parts = split_name_value(value)
    assert parts.display_name == "?"
    assert not parts.recorded


@pytest.mark.parametrize(
    "given, surname",
    [("John ", "Smith"), ("Mary Ann ", "de la Cruz"), ("Jürgen ", "Müller")],
)
def test_two_segment_names(given: str, surname: str) -> None:
    parts = split_name_value(f"{given}/{surname}/")
    assert parts.display_name == surname + " " + given
    assert parts.surname == surname


def test_first_name_line_wins() -> None:
    """Only the first NAME line of a record is used."""
    body = "INDI\n1 NAME John /Smith/\n1 NAME Johnny /Smith/\n"
    assert find_name_value(body) == "John /Smith/"


def test_name_line_must_be_level_one() -> None:
    """NAME lines at other levels, or mid-line, are ignored."""
    body = "INDI\n2 NAME John /Smith/\n1 NOTE 1 NAME x\n"
    assert find_name_value(body) is None
    assert normalize_name(body).display_name == "?"


def test_carriage_return_is_not_part_of_name() -> None:
    assert normalize_name("INDI\r\n1 NAME John /Smith/\r\n").surname == "Smith"


def test_missing_name_line_is_placeholder() -> None:
    parts = normalize_name("INDI\n1 SEX M\n")
    assert parts.display_name == "?"
    assert not parts.recorded
