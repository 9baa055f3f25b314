from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from gedcom_lineage.cli.utils import console, load_gedcom
from gedcom_lineage.graph.roots import build_root_candidates, find_default_root
from gedcom_lineage.names.display import get_display_name


def roots_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file"),
    exclude_private: bool = typer.Option(
        False,
        "--exclude-private",
        help="Leave private individuals out of the list",
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show at most N rows"),
):
    """
    List root candidates (sorted by name) and the default root.
    """
    data = load_gedcom(gedcom)
    candidates = build_root_candidates(data, exclude_private=exclude_private)
    if limit is not None:
        candidates = candidates[:limit]

    table = Table(title="Root Candidates")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    for candidate in candidates:
        table.add_row(candidate.id, candidate.text)
    console.print(table)

    default = find_default_root(data)
    if default is None:
        console.print("[yellow]No default root: file has no individuals[/yellow]")
    else:
        console.print(f"Default root: {default.id} {get_display_name(default)}")
