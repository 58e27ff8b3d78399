from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_reader.cli.utils import err_console, load_result, write_json
from gedcom_reader.exporter import result_set_to_dict


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    bodies: bool = typer.Option(
        True,
        "--bodies/--no-bodies",
        help="Include raw record text",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report timing and encoding",
    ),
):
    """
    Export the processed records to JSON (stdout by default).
    """
    result = load_result(gedcom, verbose=verbose)
    data = result_set_to_dict(result, include_bodies=bodies)

    write_json(data, out=out, pretty=pretty)

    if verbose and out:
        err_console.log(f"Wrote {out}")
