# tests/test_pipeline.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gedcom_reader.config import get_config
from gedcom_reader.core.context import ParseContext
from gedcom_reader.core.exceptions import MalformedHeader, ParseExecutionError
from gedcom_reader.core.pipeline import Pipeline
from gedcom_reader.logger import get_logger
from gedcom_reader.main import main
from gedcom_reader.utils import mock_file_path


def _context(input_path, output_path=None) -> ParseContext:
    return ParseContext(
        config=get_config(),
        logger=get_logger("test_pipeline"),
        input_path=str(input_path),
        output_path=str(output_path) if output_path else None,
    )


def test_pipeline_exports_and_records_stats(tmp_path: Path) -> None:
    """The pipeline writes JSON and fills the context stats."""
    out = tmp_path / "records.json"
    ctx = _context(mock_file_path("family.ged"), out)

    result = Pipeline(ctx).run()

    assert len(result.individuals) == 2
    assert ctx.stats["families"] == 1
    assert ctx.stats["encoding"] == "utf-8-sig"
    assert json.loads(out.read_text(encoding="utf-8"))["counts"]["others"] == 2


def test_pipeline_wraps_processing_errors(tmp_path: Path) -> None:
    """Processing errors surface as ParseExecutionError with the cause chained."""
    bad = tmp_path / "bad.ged"
    bad.write_text("HEAD\n0 @I1@ INDI\n", encoding="utf-8")
    ctx = _context(bad)

    with pytest.raises(ParseExecutionError) as excinfo:
        Pipeline(ctx).run()

    assert isinstance(excinfo.value.__cause__, MalformedHeader)
    assert ctx.failed


def test_main_returns_exit_codes(tmp_path: Path) -> None:
    """main() returns 0 on success and 1 on a processing failure."""
    out = tmp_path / "out.json"
    assert main(["-i", str(mock_file_path("household.ged")), "-o", str(out)]) == 0
    assert out.is_file()

    bad = tmp_path / "bad.ged"
    bad.write_text("nothing here", encoding="utf-8")
    assert main(["-i", str(bad), "-o", str(tmp_path / "never.json")]) == 1
    assert not (tmp_path / "never.json").exists()
