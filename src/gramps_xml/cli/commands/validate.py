from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gramps_xml.cli.utils import load_document, violations_table

console = Console()


def validate_command(
    gramps: Path = typer.Argument(..., help="Gramps XML file (.gramps or .xml)"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Also validate against the Gramps DTD when one is configured",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Report every structural and referential violation. Exits 1 if any.
    """
    _, violations = load_document(gramps, strict=strict, verbose=verbose)

    if not violations:
        console.print(f"[green]{gramps}: valid[/green]")
        return

    console.print(violations_table(violations, title=f"{gramps}: {len(violations)} violation(s)"))
    raise typer.Exit(code=1)
