from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gedcom_lineage.graph.closures import get_all_descendants
from gedcom_lineage.graph.roots import RootFilterStrategy
from gedcom_lineage.registry.entities import GedcomData


@dataclass(frozen=True)
class TreeStats:
    individuals: int
    families: int


def tree_stats(
    data: GedcomData,
    strategy: RootFilterStrategy = "all",
    root_id: Optional[str] = None,
) -> TreeStats:
    """
    Record counts for the whole file, or for the root's line of descent.

    In ``"descendants"`` scope a family counts when either parent is the
    root or one of its descendants.
    """
    if strategy == "all" or not root_id:
        return TreeStats(len(data.individuals), len(data.families))

    scope = get_all_descendants(data, root_id)
    scope.add(root_id)

    families = sum(
        1 for fam in data.families.values()
        if any(parent in scope for parent in fam.parents())
    )
    return TreeStats(individuals=len(scope), families=families)
