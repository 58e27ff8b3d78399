from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict

import typer
from rich.console import Console
from rich.markup import escape

from gedcom_reader.core.exceptions import PipelineError
from gedcom_reader.logger import configure_logging
from gedcom_reader.parser_core import GEDCOMReader
from gedcom_reader.records.models import ResultSet

console = Console()
err_console = Console(stderr=True)


def load_result(path: Path, *, verbose: bool = False, debug: bool = False) -> ResultSet:
    """
    Read and process ``path``; on failure print the reason and exit 1.
    """
    if debug:
        configure_logging(debug=True)

    t0 = time.perf_counter()
    reader = GEDCOMReader()
    try:
        result = reader.run(path)
    except PipelineError as exc:
        err_console.print(f"[bold red]Processing failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if verbose:
        elapsed = time.perf_counter() - t0
        encoding = reader.source.encoding if reader.source else "?"
        err_console.log(f"Processed {path.name} ({encoding}) in {elapsed:.2f}s")

    return result


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        typer.echo(payload)
