from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from gedcom_lineage.cli.utils import console, load_gedcom
from gedcom_lineage.graph.roots import build_root_candidates, filter_candidates, resolve_initial_root
from gedcom_lineage.graph.stats import tree_stats


def stats_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file"),
    strategy: str = typer.Option(
        "all",
        "--strategy",
        "-s",
        help="Counting scope: 'all' or 'descendants' of the root",
    ),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Root individual id"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show record counts for a GEDCOM file.
    """
    if strategy not in ("all", "descendants"):
        raise typer.BadParameter("strategy must be 'all' or 'descendants'")

    data = load_gedcom(gedcom, verbose=verbose)
    initial = resolve_initial_root(data, root)
    root_id = initial.id if initial else None

    stats = tree_stats(data, strategy, root_id)
    listed = filter_candidates(build_root_candidates(data), data, strategy, root_id)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(stats.individuals))
    table.add_row("Families", str(stats.families))
    table.add_row("Root candidates", str(len(listed)))

    console.print(table)
    if root_id:
        console.print(f"Root: {root_id}")
