from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from gedcom_reader.cli.utils import err_console, load_result


def record_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    xref: str = typer.Argument(..., help="Cross-reference id without '@', e.g. I1 or HEAD"),
):
    """
    Print the raw text of one record.
    """
    result = load_result(gedcom)
    record = result.find(xref.strip("@"))
    if record is None:
        err_console.print(f"[yellow]No record {escape(repr(xref))}[/yellow]")
        raise typer.Exit(code=1)

    typer.echo(record.body, nl=not record.body.endswith("\n"))
