from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger
from typing import Dict, List, Optional

from gedcom_reader.config import GRConfig


@dataclass
class ParseContext:
    """
    State handed from main() to the Pipeline for one file.

    ``stats`` receives the bin counts and the encoding the file was read
    with; ``errors`` collects failure messages.
    """

    config: GRConfig
    logger: Logger

    input_path: Optional[str] = None
    output_path: Optional[str] = None

    stats: Dict[str, object] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    debug: bool = False

    @property
    def failed(self) -> bool:
        return bool(self.errors)
