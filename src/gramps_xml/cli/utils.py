from __future__ import annotations

import time
from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.table import Table

from gramps_xml.core.exceptions import GrampsXmlError
from gramps_xml.core.pipeline import import_file
from gramps_xml.logging import set_debug
from gramps_xml.model.entities import Document
from gramps_xml.model.violations import Violation

console = Console()
err_console = Console(stderr=True)


def load_document(path: Path, *, strict: bool = False, verbose: bool = False) -> Tuple[Document, List[Violation]]:
    """
    Import ``path`` for a CLI command; library errors end the command with
    exit code 2 and a readable message instead of a traceback.
    """
    if verbose:
        set_debug(True)

    t0 = time.perf_counter()
    try:
        document, violations = import_file(path, strict=strict)
    except GrampsXmlError as exc:
        err_console.print(f"[red]error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.log(f"Loaded {path} in {time.perf_counter() - t0:.2f}s")

    return document, violations


def violations_table(violations: List[Violation], *, title: str = "Violations") -> Table:
    table = Table(title=title)
    table.add_column("Code", style="bold red")
    table.add_column("Kind")
    table.add_column("Record")
    table.add_column("Field")
    table.add_column("Reason")

    for v in violations:
        record = v.identifier or v.handle or "-"
        if v.identifier and v.handle:
            record = f"{v.identifier} ({v.handle})"
        table.add_row(v.code.value, v.kind or "-", record, v.field, v.reason)

    return table
