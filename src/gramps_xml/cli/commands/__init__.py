"""
CLI command modules for gramps_xml.

Each command module defines a single Typer-compatible command function.
"""

from gramps_xml.cli.commands.convert import convert_command
from gramps_xml.cli.commands.dump import dump_command
from gramps_xml.cli.commands.stats import stats_command
from gramps_xml.cli.commands.validate import validate_command

__all__ = [
    "convert_command",
    "dump_command",
    "stats_command",
    "validate_command",
]
