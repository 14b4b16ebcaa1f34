from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gramps_xml.cli.utils import load_document

console = Console()


def stats_command(
    gramps: Path = typer.Argument(..., help="Gramps XML file (.gramps or .xml)"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Show summary statistics for a Gramps XML file.
    """
    document, violations = load_document(gramps, verbose=verbose)

    table = Table(title="Gramps XML Statistics")
    table.add_column("Section", style="bold")
    table.add_column("Count", justify="right")

    for name, count in document.counts().items():
        table.add_row(name.capitalize(), str(count))
    table.add_row("Violations", str(len(violations)), style="red" if violations else "green")

    console.print(table)
