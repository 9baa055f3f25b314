"""
CLI command modules for gedcom_lineage.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_lineage.cli.commands.export import export_command
from gedcom_lineage.cli.commands.person import person_command
from gedcom_lineage.cli.commands.roots import roots_command
from gedcom_lineage.cli.commands.search import search_command
from gedcom_lineage.cli.commands.stats import stats_command
from gedcom_lineage.cli.commands.tree import tree_command

__all__ = [
    "export_command",
    "person_command",
    "roots_command",
    "search_command",
    "stats_command",
    "tree_command",
]
