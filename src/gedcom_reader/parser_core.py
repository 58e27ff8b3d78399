"""
parser_core.py
Record-splitting and cross-reference resolution engine.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from gedcom_reader.config import get_config
from gedcom_reader.core.exceptions import ProcessingError
from gedcom_reader.loader.file_loader import LoadedText, read_gedcom_text
from gedcom_reader.loader.splitter import split_records
from gedcom_reader.logger import get_logger
from gedcom_reader.records.classifier import classify_all
from gedcom_reader.records.linking import resolve_families
from gedcom_reader.records.models import ResultSet

log = get_logger("parser_core")


def parse_text(text: str) -> ResultSet:
    """
    Parse a complete GEDCOM text into a ResultSet.

    Stage 1 splits the text and classifies every record, indexing surnames
    as individuals go by. Stage 2 resolves family spouse surnames against
    the finished index.

    Raises:
        ProcessingError: (MalformedHeader, MalformedRecordBoundary,
            UnreadableBody) if the text cannot be split. Nothing is
            returned in that case.
    """
    records = split_records(text)
    bins = classify_all(records)
    families = resolve_families(bins.families, bins.surnames)

    result = ResultSet(
        families=tuple(families),
        individuals=tuple(bins.individuals),
        sources=tuple(bins.sources),
        others=tuple(bins.others),
    )
    log.debug(
        "Parsed %d records (surname index: %d entries)",
        len(result),
        len(bins.surnames),
    )
    return result


class GEDCOMReader:
    """
    Holds the currently published ResultSet.

    process() replaces it only when a parse succeeds; after a failure the
    previous ResultSet (possibly the empty one) is still what ``result``
    returns.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("reader")

        self._result: ResultSet = ResultSet()
        self.source: Optional[LoadedText] = None
        self.last_error: Optional[ProcessingError] = None

    @property
    def result(self) -> ResultSet:
        return self._result

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def load_file(self, path: Union[str, Path]) -> LoadedText:
        """Read a file into ``self.source`` without parsing it."""
        self.log.info(f"Reading GEDCOM input: {path}")
        self.source = read_gedcom_text(path, encodings=self.cfg.encodings)
        return self.source

    # ---------------------------------------------------------
    # Parse + publish
    # ---------------------------------------------------------
    def process(self, text: Optional[str] = None) -> ResultSet:
        """
        Parse ``text`` (or the loaded file) and publish the result.

        Raises:
            ProcessingError: the parse failed; ``result`` is unchanged.
            ValueError: no text given and no file loaded.
        """
        if text is None:
            if self.source is None:
                raise ValueError("No text to process: pass text or call load_file() first")
            text = self.source.text

        try:
            staged = parse_text(text)
        except ProcessingError as exc:
            self.last_error = exc
            self.log.error("Processing failed: %s", exc)
            raise

        self._result = staged
        self.last_error = None
        counts = staged.counts()
        self.log.info(
            "Processed GEDCOM: FAM=%d INDI=%d SOUR=%d other=%d",
            counts["families"],
            counts["individuals"],
            counts["sources"],
            counts["others"],
        )
        return staged

    def run(self, input_path: Union[str, Path]) -> ResultSet:
        """Load and process a file in one call."""
        self.load_file(input_path)
        return self.process()
