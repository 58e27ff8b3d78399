from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Pattern


@lru_cache(maxsize=None)
def _line_pattern(prefix: str) -> Pattern[str]:
    return re.compile(r"^" + re.escape(prefix) + r"(.*?)\r?$", re.MULTILINE)


def rest_of_line(body: str, prefix: str) -> Optional[str]:
    """
    Return the remainder of the first line of ``body`` that starts with
    ``prefix``, without the line terminator, or None if no line does.

        rest_of_line("INDI\\n1 NAME John /Smith/\\n", "1 NAME ") -> "John /Smith/"
    """
    match = _line_pattern(prefix).search(body)
    return match.group(1) if match else None


def pointer_target(value: str) -> Optional[str]:
    """
    First non-empty piece of a pointer value split on ``@``.

        "@I1@" -> "I1",  "@" -> None
    """
    for piece in value.split("@"):
        if piece:
            return piece
    return None
