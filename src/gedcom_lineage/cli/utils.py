from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console

from gedcom_lineage.core.exceptions import SourceLoadError
from gedcom_lineage.loader.file_loader import load_source
from gedcom_lineage.parser_core import parse_gedcom
from gedcom_lineage.registry.entities import GedcomData, Individual

console = Console()
err_console = Console(stderr=True)


def fail(message: str) -> None:
    """Print an error and stop with exit code 1."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


def load_gedcom(path: Path, *, verbose: bool = False) -> GedcomData:
    """
    Load + parse runner shared by the commands.
    """
    t0 = time.perf_counter()

    try:
        text = load_source(path)
    except SourceLoadError as exc:
        fail(str(exc))

    data = parse_gedcom(text)
    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(
            f"Loaded {len(data.individuals)} individuals, "
            f"{len(data.families)} families in {elapsed:.2f}s"
        )

    return data


def require_person(data: GedcomData, person_id: str) -> Individual:
    person = data.get_individual(person_id)
    if person is None:
        fail(f"Individual {person_id} not found")
    return person
