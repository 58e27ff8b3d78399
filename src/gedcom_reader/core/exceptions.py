from __future__ import annotations

from typing import Optional


class PipelineError(Exception):
    """Base exception for reader failures."""


class ProcessingError(PipelineError):
    """
    The text could not be split into records.

    Every splitter failure surfaces as this single "processing failed"
    outcome; subclasses only refine the reason.
    """

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        self.position = position
        where = f" (at offset {position})" if position is not None else ""
        super().__init__(f"{reason}{where}")


class MalformedHeader(ProcessingError):
    """Text does not begin with the ``0 HEAD`` header line."""


class MalformedRecordBoundary(ProcessingError):
    """A ``0 @XREF@ `` record boundary could not be parsed."""


class UnreadableBody(MalformedRecordBoundary):
    """The body scan could not reach the next boundary or end of text."""


class GedcomDecodeError(PipelineError):
    """File bytes could not be decoded with any configured encoding."""


class ParseExecutionError(PipelineError):
    """Raised when the pipeline fails."""
