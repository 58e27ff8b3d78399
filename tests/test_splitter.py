# tests/test_splitter.py

from __future__ import annotations

import pytest

from gedcom_reader.core.exceptions import (
    MalformedHeader,
    MalformedRecordBoundary,
    ProcessingError,
    UnreadableBody,
)
from gedcom_reader.loader import RawRecord, iter_records, split_records


def test_split_records_sample(sample_text: str) -> None:
    """Records come out in file order with bodies verbatim."""
    records = split_records(sample_text)

    assert [r.xref for r in records] == ["HEAD", "I1", "I2", "F1", "S1", "N1"]
    assert records[0].body == "1 GEDC\n2 VERS 7.0\n"
    assert records[1].body == "INDI\n1 NAME John /Smith/\n1 FAMS @F1@\n"


def test_trailer_is_absorbed_into_last_record(sample_text: str) -> None:
    """0 TRLR is never its own record."""
    last = split_records(sample_text)[-1]
    assert last == RawRecord(xref="N1", body="SNOTE Shared note 1\n0 TRLR")


def test_record_count_is_boundaries_plus_header(sample_text: str) -> None:
    records = split_records(sample_text)
    assert len(records) == sample_text.count("0 @") + 1


def test_crlf_line_endings_are_kept_verbatim() -> None:
    """CRLF files split on the same boundaries; bodies keep their CRs."""
    text = "0 HEAD\r\n1 GEDC\r\n0 @I1@ INDI\r\n1 NAME A /B/\r\n0 TRLR\r\n"
    records = split_records(text)
    assert [r.xref for r in records] == ["HEAD", "I1"]
    assert records[1].body == "INDI\r\n1 NAME A /B/\r\n0 TRLR\r\n"


def test_header_only_yields_no_records() -> None:
    assert split_records("0 HEAD\n") == []


def test_missing_header_raises() -> None:
    """Text that does not open with 0 HEAD fails before any record is produced."""
    with pytest.raises(MalformedHeader) as excinfo:
        split_records("0 @I1@ INDI\n1 NAME A /B/\n0 TRLR")
    assert isinstance(excinfo.value, ProcessingError)
    assert excinfo.value.reason == "failed on header record"


def test_empty_text_raises_malformed_header() -> None:
    with pytest.raises(MalformedHeader):
        split_records("")


def test_boundary_without_closing_delimiter_raises() -> None:
    """An xref missing its closing @ is a malformed boundary."""
    with pytest.raises(MalformedRecordBoundary):
        split_records("0 HEAD\n1 GEDC\n0 @I1 INDI\n1 NAME A\n")


def test_boundary_without_separator_raises() -> None:
    """The closing @ must be followed by a space."""
    with pytest.raises(MalformedRecordBoundary):
        split_records("0 HEAD\n1 GEDC\n0 @I1@\n1 NAME A\n")


def test_empty_body_raises_unreadable_body() -> None:
    """Back-to-back boundaries leave a body that cannot be read."""
    with pytest.raises(UnreadableBody) as excinfo:
        split_records("0 HEAD\n0 @I1@ INDI\n0 TRLR")
    # Reported as a boundary failure too.
    assert isinstance(excinfo.value, MalformedRecordBoundary)


def test_iter_records_yields_before_failure() -> None:
    """The lazy splitter yields good records before raising."""
    text = "0 HEAD\n1 GEDC\n0 @I1 INDI\n"
    it = iter_records(text)
    assert next(it).xref == "HEAD"
    with pytest.raises(MalformedRecordBoundary):
        next(it)


def test_kind_is_first_character() -> None:
    assert RawRecord(xref="F12", body="").kind == "F"
    assert RawRecord(xref="HEAD", body="").kind == "H"
