from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_lineage.cli.utils import err_console, load_gedcom
from gedcom_lineage.exporter import build_export_dict, write_json
from gedcom_lineage.graph.closures import get_tree_visible_individuals
from gedcom_lineage.graph.roots import find_default_root


def export_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    exclude_private: bool = typer.Option(
        False,
        "--exclude-private",
        help="Drop private individuals from the visible set",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export parsed records, the default root and its visible set to JSON (stdout by default).
    """
    data = load_gedcom(gedcom, verbose=verbose)
    root = find_default_root(data)
    visible = (
        get_tree_visible_individuals(data, root.id, exclude_private=exclude_private)
        if root
        else set()
    )

    if verbose:
        err_console.log("Exporting JSON")

    write_json(build_export_dict(data, default_root=root, visible=visible), out=out, pretty=pretty)

    if verbose:
        err_console.log("Export complete")
