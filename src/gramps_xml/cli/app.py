from __future__ import annotations

import typer

from gramps_xml.cli.commands.convert import convert_command
from gramps_xml.cli.commands.dump import dump_command
from gramps_xml.cli.commands.stats import stats_command
from gramps_xml.cli.commands.validate import validate_command

app = typer.Typer(
    name="gramps-xml",
    help="Gramps XML reader, validator, and writer",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("validate")(validate_command)
app.command("convert")(convert_command)
app.command("dump")(dump_command)


def main():
    app()


if __name__ == "__main__":
    main()
