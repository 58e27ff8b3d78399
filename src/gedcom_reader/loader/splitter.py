# src/gedcom_reader/loader/splitter.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from gedcom_reader.core.exceptions import (
    MalformedHeader,
    MalformedRecordBoundary,
    UnreadableBody,
)
from gedcom_reader.logger import get_logger

from .cursor import TextCursor

log = get_logger("splitter")

HEADER_LITERAL = "0 HEAD"
HEADER_XREF = "HEAD"
BOUNDARY_OPEN = "0 @"
XREF_CLOSE = "@"
XREF_TERMINATOR = "@ "


@dataclass(frozen=True)
class RawRecord:
    """
    One level-0 record cut out of the input text.

    Attributes:
        xref: Cross-reference id without the ``@`` delimiters ("I1", "F1"),
              or the ``HEAD`` sentinel for the header record.
        body: Everything after ``@XREF@ `` up to the next boundary, verbatim.
              The last record also carries the ``0 TRLR`` trailer.
    """

    xref: str
    body: str

    @property
    def kind(self) -> str:
        """First character of the xref; drives classification."""
        return self.xref[:1]


def _scan_next_xref(cursor: TextCursor) -> str:
    """
    Consume ``0 @XREF@ `` and return ``XREF``.

    Raises:
        MalformedRecordBoundary: if any of the three parts is missing.
    """
    start = cursor.position
    if cursor.scan_string(BOUNDARY_OPEN) is None:
        raise MalformedRecordBoundary(
            "failed reading next xref: expected '0 @'", position=start
        )

    xref = cursor.scan_up_to(XREF_CLOSE)
    if xref is None or cursor.position >= len(cursor.text):
        raise MalformedRecordBoundary(
            "failed reading next xref: unterminated cross-reference id",
            position=start,
        )

    if cursor.scan_string(XREF_TERMINATOR) is None:
        raise MalformedRecordBoundary(
            f"failed reading next xref: expected '@ ' after {xref!r}",
            position=cursor.position,
        )
    return xref


def iter_records(text: str) -> Iterator[RawRecord]:
    """
    Yield RawRecords from a complete GEDCOM text, in file order.

    Each pass reads the whole body of the current record first and only then
    parses the xref of the record that follows, because the ``0 @`` that ends
    one body is also the start of the next record's boundary.

    Raises:
        MalformedHeader: if the text does not start with ``0 HEAD``.
        MalformedRecordBoundary: if a ``0 @XREF@ `` boundary is malformed.
        UnreadableBody: if a body is empty.
    """
    cursor = TextCursor(text)
    if cursor.scan_string(HEADER_LITERAL) is None:
        raise MalformedHeader("failed on header record", position=cursor.position)

    xref = HEADER_XREF
    while not cursor.is_at_end:
        body = cursor.scan_up_to(BOUNDARY_OPEN)
        if body is None:
            raise UnreadableBody(
                f"failed reading up to next record after {xref!r}",
                position=cursor.position,
            )

        log.debug("Split record %s (%d chars)", xref, len(body))
        yield RawRecord(xref=xref, body=body)

        if not cursor.is_at_end:
            xref = _scan_next_xref(cursor)


def split_records(text: str) -> List[RawRecord]:
    """Materialize iter_records(); raises before returning anything on error."""
    records = list(iter_records(text))
    log.debug("Splitter produced %d records", len(records))
    return records
