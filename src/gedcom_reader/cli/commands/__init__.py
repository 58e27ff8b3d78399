"""
CLI command modules for gedcom_reader.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_reader.cli.commands.export import export_command
from gedcom_reader.cli.commands.record import record_command
from gedcom_reader.cli.commands.show import show_command
from gedcom_reader.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "record_command",
    "show_command",
    "stats_command",
]
