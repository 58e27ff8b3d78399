from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from gedcom_reader.cli.utils import console, load_result
from gedcom_reader.config import get_config
from gedcom_reader.sorting import INDIVIDUAL_SORT_KEYS, sort_individuals, sort_records


def show_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        "-s",
        help="Sort INDI by 'xref' or 'name' (default from config)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    List FAM, INDI, SOUR and other records, sorted for display.
    """
    sort_key = sort or get_config().sort_individuals_by
    if sort_key not in INDIVIDUAL_SORT_KEYS:
        raise typer.BadParameter(
            f"expected one of {', '.join(INDIVIDUAL_SORT_KEYS)}", param_hint="--sort"
        )

    result = load_result(gedcom, debug=debug)

    fam_table = Table(title="FAM")
    fam_table.add_column("Xref", style="bold")
    fam_table.add_column("HUSB")
    fam_table.add_column("WIFE")
    for fam in sort_records(result.families):
        fam_table.add_row(Text(fam.xref), Text(fam.husband_surname), Text(fam.wife_surname))

    indi_table = Table(title="INDI")
    indi_table.add_column("Xref", style="bold")
    indi_table.add_column("Name")
    for ind in sort_individuals(result.individuals, by=sort_key):
        indi_table.add_row(Text(ind.xref), Text(ind.display_name))

    console.print(fam_table)
    console.print(indi_table)

    for title, records in (("SOUR", result.sources), ("Other", result.others)):
        table = Table(title=title)
        table.add_column("Xref", style="bold")
        table.add_column("First line")
        for rec in sort_records(records):
            first_line = rec.body.splitlines()[0] if rec.body else ""
            table.add_row(Text(rec.xref), Text(first_line))
        console.print(table)
