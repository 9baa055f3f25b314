
from __future__ import annotations

import typer

from gedcom_lineage.cli.commands import (
    export_command,
    person_command,
    roots_command,
    search_command,
    stats_command,
    tree_command,
)

app = typer.Typer(
    name="gedcom-lineage",
    help="GEDCOM family graph: roots, lineages, search and tree layout",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("roots")(roots_command)
app.command("person")(person_command)
app.command("search")(search_command)
app.command("tree")(tree_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
