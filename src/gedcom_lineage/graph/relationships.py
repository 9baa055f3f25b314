from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set

from gedcom_lineage.graph.closures import is_displayable
from gedcom_lineage.registry.entities import GedcomData, Individual


@dataclass
class PersonRelationships:
    """Immediate family of one person; private and dangling entries are left out."""
    parents: List[Individual] = field(default_factory=list)
    siblings: List[Individual] = field(default_factory=list)
    spouses: List[Individual] = field(default_factory=list)
    children: List[Individual] = field(default_factory=list)

    def as_ids(self) -> Dict[str, List[str]]:
        return {
            "parents": [p.id for p in self.parents],
            "siblings": [p.id for p in self.siblings],
            "spouses": [p.id for p in self.spouses],
            "children": [p.id for p in self.children],
        }


def get_person_relationships(data: GedcomData, person_id: str) -> PersonRelationships:
    rel = PersonRelationships()
    person = data.get_individual(person_id)
    if person is None:
        return rel

    def visible(pid) -> bool:
        return is_displayable(data.get_individual(pid))

    # Parents & siblings from the FAMC family
    family = data.get_family(person.family_as_child)
    if family is not None:
        for parent_id in (family.husband, family.wife):
            if visible(parent_id):
                rel.parents.append(data.individuals[parent_id])
        for child_id in family.children:
            if child_id != person_id and visible(child_id):
                rel.siblings.append(data.individuals[child_id])

    # Spouses & children across FAMS families
    seen_spouses: Set[str] = set()
    seen_children: Set[str] = set()
    for union in data.spouse_families(person):
        spouse_id = union.spouse_of(person_id)
        if spouse_id and spouse_id not in seen_spouses and visible(spouse_id):
            seen_spouses.add(spouse_id)
            rel.spouses.append(data.individuals[spouse_id])

        for child_id in union.children:
            if child_id not in seen_children and visible(child_id):
                seen_children.add(child_id)
                rel.children.append(data.individuals[child_id])

    return rel
