from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gramps_xml.cli.utils import err_console, load_document
from gramps_xml.core.exceptions import IoFailure
from gramps_xml.exporter.json_exporter import (
    export_document_json,
    serialize_document_to_json_string,
)

console = Console()


def dump_command(
    gramps: Path = typer.Argument(..., help="Gramps XML file to read"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write JSON to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Dump the parsed document model as JSON (stdout by default).
    """
    document, _ = load_document(gramps, verbose=verbose)

    if out:
        try:
            export_document_json(document, out, indent=2 if pretty else None)
        except IoFailure as exc:
            err_console.print(f"[red]error:[/red] {exc}")
            raise typer.Exit(code=2) from exc
        if verbose:
            console.log(f"JSON written to {out}")
    else:
        print(serialize_document_to_json_string(document, indent=2 if pretty else None))
