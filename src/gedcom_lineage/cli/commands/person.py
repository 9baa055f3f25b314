from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from gedcom_lineage.cli.utils import console, load_gedcom, require_person
from gedcom_lineage.config import get_config
from gedcom_lineage.graph.relationships import get_person_relationships
from gedcom_lineage.names.display import get_display_name, get_display_name_with_nasab
from gedcom_lineage.registry.entities import Individual
from gedcom_lineage.utils.search import format_life_dates


def _add_section(table: Table, title: str, people: List[Individual]) -> None:
    for person in people:
        table.add_row(title, person.id, get_display_name(person), format_life_dates(person))


def person_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file"),
    person_id: str = typer.Argument(..., help="Individual id, e.g. @I1@"),
    nasab_depth: Optional[int] = typer.Option(
        None,
        "--nasab-depth",
        "-d",
        min=0,
        help="Generations in the nasab chain (0 = full chain)",
    ),
):
    """
    Show one individual: nasab name, dates and immediate family.
    """
    data = load_gedcom(gedcom)
    person = require_person(data, person_id)

    depth = nasab_depth if nasab_depth is not None else int(get_config().tree["nasab_depth"])
    console.print(f"[bold]{get_display_name_with_nasab(data, person, depth)}[/bold]")

    dates = format_life_dates(person)
    if dates:
        console.print(dates)
    if person.is_deceased:
        console.print("[dim]deceased[/dim]")

    rel = get_person_relationships(data, person.id)
    table = Table(title="Relationships")
    table.add_column("Relation", style="bold")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Dates")

    _add_section(table, "parent", rel.parents)
    _add_section(table, "sibling", rel.siblings)
    _add_section(table, "spouse", rel.spouses)
    _add_section(table, "child", rel.children)

    console.print(table)
