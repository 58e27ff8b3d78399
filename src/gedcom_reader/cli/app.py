from __future__ import annotations

import typer

from gedcom_reader.cli.commands.export import export_command
from gedcom_reader.cli.commands.record import record_command
from gedcom_reader.cli.commands.show import show_command
from gedcom_reader.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-reader",
    help="Split GEDCOM files into family, individual, source and other records",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("show")(show_command)
app.command("record")(record_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
