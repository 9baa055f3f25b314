from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_lineage.cli.utils import err_console, fail
from gedcom_lineage.config import get_config
from gedcom_lineage.core.context import TreeContext
from gedcom_lineage.core.pipeline import Pipeline
from gedcom_lineage.exporter import layout_to_dict, write_json
from gedcom_lineage.logging import get_logger

log = get_logger("cli.tree")


def tree_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file"),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Root individual id"),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", "-d", min=0, help="Generations below the root"),
    highlight: Optional[str] = typer.Option(None, "--highlight", help="Trace the lineage of this individual"),
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
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Lay out the family tree under a root and emit node positions and edges as JSON.
    """
    cfg = get_config()
    ctx = TreeContext(
        config=cfg,
        logger=log,
        input_path=str(gedcom),
        forced_root_id=root,
        max_depth=max_depth,
        highlight_id=highlight,
        debug=cfg.debug,
    )

    snapshot = Pipeline(ctx).run()
    if ctx.failed:
        fail(ctx.errors[0])
    if snapshot is None or snapshot.view is None:
        fail("No root individual to lay out")

    if verbose:
        err_console.log(f"Laid out {ctx.stats['nodes']} nodes under {ctx.stats['root']}")

    write_json(layout_to_dict(snapshot.view, snapshot.layout), out=out, pretty=pretty)
