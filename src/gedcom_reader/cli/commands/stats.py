from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_reader.cli.utils import console, load_result


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report timing and encoding",
    ),
):
    """
    Show record counts per bin for a GEDCOM file.
    """
    result = load_result(gedcom, verbose=verbose)
    counts = result.counts()

    table = Table(title="GEDCOM Records")
    table.add_column("Bin", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("FAM", str(counts["families"]))
    table.add_row("INDI", str(counts["individuals"]))
    table.add_row("SOUR", str(counts["sources"]))
    table.add_row("Other", str(counts["others"]))
    table.add_row("Total", str(len(result)), style="dim")

    console.print(table)
