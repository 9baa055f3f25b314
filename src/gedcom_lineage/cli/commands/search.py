from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_lineage.cli.utils import console, load_gedcom
from gedcom_lineage.utils.search import search_individuals


def search_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file"),
    query: str = typer.Argument(..., help="Words that must all appear in the name"),
):
    """
    Find individuals by name (case and diacritics ignored).
    """
    data = load_gedcom(gedcom)
    matches = search_individuals(data, query)

    if not matches:
        console.print("No results")
        return

    table = Table(title=f"{len(matches)} result(s)")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Dates")
    for match in matches:
        table.add_row(match.id, match.name, match.dates)
    console.print(table)
