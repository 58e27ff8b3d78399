# src/gedcom_reader/loader/file_loader.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from gedcom_reader.config import get_config
from gedcom_reader.core.exceptions import GedcomDecodeError
from gedcom_reader.logger import get_logger

log = get_logger("file_loader")


@dataclass(frozen=True)
class LoadedText:
    path: Path
    text: str
    encoding: str


def read_gedcom_text(
    path: Union[str, Path],
    encodings: Optional[Sequence[str]] = None,
) -> LoadedText:
    """
    Read a GEDCOM file into a string.

    The first encoding is tried, and on a decode failure exactly one retry
    is made with the second (Mac Roman by default, for old files saved on a
    Mac). Further entries in ``encodings`` are ignored.

    Raises:
        FileNotFoundError: if ``path`` is not a file.
        GedcomDecodeError: if neither encoding can decode the bytes.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    candidates = list(encodings if encodings is not None else get_config().encodings)[:2]
    if not candidates:
        raise ValueError("At least one encoding is required")

    raw = file_path.read_bytes()
    for attempt, encoding in enumerate(candidates):
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as exc:
            log.warning("Decoding %s as %s failed: %s", file_path.name, encoding, exc)
            continue

        if attempt:
            log.info("Read %s using fallback encoding %s", file_path.name, encoding)
        else:
            log.debug("Read %s as %s (%d bytes)", file_path.name, encoding, len(raw))
        return LoadedText(path=file_path, text=text, encoding=encoding)

    raise GedcomDecodeError(
        f"Could not decode {file_path} with any of: {', '.join(candidates)}"
    )
