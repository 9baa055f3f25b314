"""
Root selection: candidate lists and the default-root heuristic.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Literal, Mapping, Optional, Sequence

from gedcom_lineage.graph.closures import build_children_graph, get_all_descendants
from gedcom_lineage.logging import get_logger
from gedcom_lineage.names.display import get_display_name
from gedcom_lineage.registry.entities import GedcomData, Individual, RootAncestor

log = get_logger("roots")

RootFilterStrategy = Literal["all", "descendants"]


def _name_key(person: Individual):
    return (get_display_name(person).casefold(), person.id)


def find_root_ancestors(data: GedcomData, exclude_private: bool = False) -> List[Individual]:
    """Every individual (optionally only non-private ones), sorted by display name."""
    people = [
        p for p in data.individuals.values()
        if not (exclude_private and p.is_private)
    ]
    people.sort(key=_name_key)
    return people


def calculate_descendant_counts(
    individuals: Mapping[str, Individual],
    children_of: Mapping[str, Sequence[str]],
) -> Dict[str, int]:
    """
    Descendant count per person, leaves first (Kahn's algorithm).

    A node is processed once all of its children are; it then credits each
    parent with ``1 + its own count``. A descendant reachable through two
    lines is credited along both. People caught in a cycle never become
    ready and keep a partial count.
    """
    counts: Dict[str, int] = {}
    out_degree: Dict[str, int] = {}
    parents_of: Dict[str, List[str]] = {}

    for person_id in individuals:
        # Dangling child pointers would never be processed; drop them.
        children = [c for c in children_of.get(person_id, ()) if c in individuals]
        out_degree[person_id] = len(children)
        counts[person_id] = 0
        for child_id in children:
            parents_of.setdefault(child_id, []).append(person_id)

    queue = deque(pid for pid in individuals if out_degree[pid] == 0)

    while queue:
        node_id = queue.popleft()
        credit = 1 + counts.get(node_id, 0)

        for parent_id in parents_of.get(node_id, ()):
            counts[parent_id] += credit
            out_degree[parent_id] -= 1
            if out_degree[parent_id] == 0:
                queue.append(parent_id)

    return counts


def find_default_root(data: GedcomData) -> Optional[Individual]:
    """
    The individual the tree opens on.

    Among people without a recorded parental family, the one with the most
    descendants. Falls back to the alphabetically first person when
    everyone has parents, and to None when there is nobody.
    """
    true_roots = [p for p in data.individuals.values() if not p.family_as_child]

    if not true_roots:
        everyone = find_root_ancestors(data)
        return everyone[0] if everyone else None

    if len(true_roots) == 1:
        return true_roots[0]

    counts = calculate_descendant_counts(data.individuals, build_children_graph(data))

    selected: Optional[Individual] = None
    best = -1
    for root in true_roots:
        count = counts.get(root.id, 0)
        if count > best:
            best, selected = count, root

    log.debug("Default root %s with %d descendants", selected.id if selected else None, best)
    return selected


# ---------------------------------------------------------
# Root-selector candidates
# ---------------------------------------------------------
def root_label(person: Individual) -> str:
    label = get_display_name(person)
    if person.birth:
        label += f" ({person.birth})"
    return label


def build_root_candidates(data: GedcomData, exclude_private: bool = False) -> List[RootAncestor]:
    return [
        RootAncestor(id=p.id, text=root_label(p))
        for p in find_root_ancestors(data, exclude_private=exclude_private)
    ]


def resolve_initial_root(data: GedcomData, forced_root_id: Optional[str] = None) -> Optional[Individual]:
    """Forced root when it exists in the data, otherwise the default root."""
    if forced_root_id:
        forced = data.get_individual(forced_root_id)
        if forced is not None:
            return forced
        log.error('Forced root ID "%s" not found in GEDCOM data', forced_root_id)
    return find_default_root(data)


def filter_candidates(
    candidates: Sequence[RootAncestor],
    data: GedcomData,
    strategy: RootFilterStrategy = "descendants",
    initial_root_id: Optional[str] = None,
) -> List[RootAncestor]:
    """
    Narrow the selector list: ``"descendants"`` keeps the initial root and
    its descendants, ``"all"`` keeps everything.
    """
    if strategy == "all" or not initial_root_id:
        return list(candidates)

    scope = get_all_descendants(data, initial_root_id)
    scope.add(initial_root_id)
    return [c for c in candidates if c.id in scope]
