from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gramps_xml.cli.utils import err_console, load_document, violations_table
from gramps_xml.core.exceptions import IoFailure
from gramps_xml.core.pipeline import export_file

console = Console()


def convert_command(
    gramps: Path = typer.Argument(..., help="Gramps XML file to read"),
    out: Path = typer.Option(
        ...,
        "--out",
        "-o",
        help="Where to write the re-serialized file",
    ),
    compress: Optional[bool] = typer.Option(
        None,
        "--compress/--no-compress",
        help="Gzip the output (default: export.compress from config)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Write even when the input has violations",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Read a Gramps file and write it back in the current schema version.
    """
    document, violations = load_document(gramps, verbose=verbose)

    if violations and not force:
        console.print(violations_table(violations, title="Refusing to convert"))
        console.print("Use --force to write anyway.")
        raise typer.Exit(code=1)

    try:
        target = export_file(out, document, compress=compress)
    except IoFailure as exc:
        err_console.print(f"[red]error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    console.print(f"Wrote {target}")
