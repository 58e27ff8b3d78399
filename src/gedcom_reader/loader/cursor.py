# src/gedcom_reader/loader/cursor.py

from __future__ import annotations

from typing import Optional


class TextCursor:
    """
    A forward-only position over an in-memory GEDCOM string.

    Every scan first skips whitespace (spaces, tabs, CR/LF) at the current
    position, then tries to consume text. A failed scan leaves the position
    where it was before the whitespace skip.

    Attributes:
        text: The full input string.
        position: Offset of the next unconsumed character.
    """

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    def __repr__(self) -> str:
        return f"<TextCursor {self.position}/{len(self.text)}>"

    # ---------- Helpers ----------

    def _skip_whitespace(self) -> int:
        pos = self.position
        end = len(self.text)
        while pos < end and self.text[pos].isspace():
            pos += 1
        return pos

    @property
    def is_at_end(self) -> bool:
        """True when nothing but whitespace remains."""
        return self._skip_whitespace() >= len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.position :]

    # ---------- Scans ----------

    def scan_string(self, literal: str) -> Optional[str]:
        """
        Consume ``literal`` if it is the next non-whitespace text.

        Returns the literal on success, None otherwise.
        """
        start = self._skip_whitespace()
        if not self.text.startswith(literal, start):
            return None
        self.position = start + len(literal)
        return literal

    def scan_up_to(self, literal: str) -> Optional[str]:
        """
        Consume everything up to (not including) the next ``literal``, or up
        to the end of the text when ``literal`` does not occur again.

        Returns None when nothing could be consumed, i.e. ``literal`` sits
        right at the cursor or only whitespace is left.
        """
        start = self._skip_whitespace()
        stop = self.text.find(literal, start)
        if stop == -1:
            stop = len(self.text)
        if stop == start:
            return None
        self.position = stop
        return self.text[start:stop]
