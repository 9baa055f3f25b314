"""
Ancestor/descendant closures and privacy-filtered visibility sets.

Input may be cyclic or otherwise corrupt, so every walk keeps an explicit
visited set and runs on an explicit stack rather than recursion.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Set

from gedcom_lineage.registry.entities import GedcomData, Individual


def build_children_graph(data: GedcomData) -> Dict[str, List[str]]:
    """
    Adjacency list: person id -> child ids, across every family the person
    parents. Children are de-duplicated per parent, first-seen order.
    """
    children_of: Dict[str, List[str]] = {pid: [] for pid in data.individuals}

    for family in data.families.values():
        for parent_id in family.parents():
            children = children_of.setdefault(parent_id, [])
            for child_id in family.children:
                if child_id not in children:
                    children.append(child_id)

    return children_of


def get_all_ancestors(data: GedcomData, person_id: str) -> Set[str]:
    """Parents, grandparents, ... of ``person_id``; never includes the subject."""
    ancestors: Set[str] = set()
    stack = [person_id]

    while stack:
        person = data.get_individual(stack.pop())
        if person is None:
            continue
        family = data.get_family(person.family_as_child)
        if family is None:
            continue
        for parent_id in family.parents():
            if parent_id in ancestors or parent_id not in data.individuals:
                continue
            ancestors.add(parent_id)
            stack.append(parent_id)

    ancestors.discard(person_id)
    return ancestors


def get_all_descendants(data: GedcomData, root_id: str) -> Set[str]:
    """Children, grandchildren, ... of ``root_id``; never includes the subject."""
    descendants: Set[str] = set()
    stack = [root_id]

    while stack:
        person = data.get_individual(stack.pop())
        if person is None:
            continue
        for family in data.spouse_families(person):
            for child_id in family.children:
                if child_id in descendants or child_id not in data.individuals:
                    continue
                descendants.add(child_id)
                stack.append(child_id)

    descendants.discard(root_id)
    return descendants


def get_tree_visible_individuals(
    data: GedcomData,
    root_id: str,
    exclude_private: bool = False,
) -> Set[str]:
    """
    Everyone drawn for ``root_id``: the root, its descendants and the spouse
    of each of them in every union they belong to.
    """
    root = data.get_individual(root_id)
    if exclude_private and root is not None and root.is_private:
        return set()

    members = {root_id} | get_all_descendants(data, root_id)
    visible = set(members)

    # One hop only: a spouse's other spouses are not pulled in.
    for person_id in members:
        person = data.get_individual(person_id)
        if person is None:
            continue
        for family in data.spouse_families(person):
            spouse_id = family.spouse_of(person_id)
            if spouse_id and spouse_id in data.individuals:
                visible.add(spouse_id)

    if exclude_private:
        return filter_out_private(visible, data.individuals)
    return visible


def filter_out_private(ids: Iterable[str], individuals: Mapping[str, Individual]) -> Set[str]:
    """Keep ids of known, non-private individuals."""
    return {pid for pid in ids if is_displayable(individuals.get(pid))}


def is_displayable(person: Optional[Individual]) -> bool:
    return person is not None and not person.is_private
