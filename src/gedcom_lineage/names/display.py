"""
Display names and Arabic nasab (patronymic) chains.
"""

from __future__ import annotations

from typing import List, Optional, Set

from gedcom_lineage.registry.entities import GedcomData, Individual

UNKNOWN_NAME = "Unknown"
DEFAULT_NASAB_DEPTH = 2

SON_OF = "بن"
DAUGHTER_OF = "بنت"


def get_display_name(person: Optional[Individual]) -> str:
    """
    Preferred label for a person.

    A raw NAME that already has several words wins; otherwise given + surname,
    then whichever single part is present.
    """
    if person is None:
        return UNKNOWN_NAME

    if len(person.name.split()) > 1:
        return person.name

    if person.given_name and person.surname:
        return f"{person.given_name} {person.surname}"

    for part in (person.given_name, person.name, person.surname):
        if part:
            return part

    return UNKNOWN_NAME


def get_father(data: GedcomData, person: Individual) -> Optional[Individual]:
    family = data.get_family(person.family_as_child)
    if family is None:
        return None
    return data.get_individual(family.husband)


def _link_name(person: Individual) -> str:
    return person.given_name or person.name or UNKNOWN_NAME


def get_display_name_with_nasab(
    data: GedcomData,
    person: Optional[Individual],
    depth: int = DEFAULT_NASAB_DEPTH,
) -> str:
    """
    Name followed by the paternal chain, surname appended once at the end.

    ``depth`` counts generations including the person: 1 is the plain display
    name, 2 adds the father, 0 climbs until the chain ends. A father already
    in the chain stops the climb.

        depth=3 -> "أحمد بن محمد بن علي سعيد"
    """
    if person is None:
        return UNKNOWN_NAME

    if depth == 1:
        return get_display_name(person)

    parts: List[str] = [_link_name(person)]
    visited: Set[str] = {person.id}

    current = person
    generations = 1
    while depth == 0 or generations < depth:
        father = get_father(data, current)
        if father is None or father.id in visited:
            break
        visited.add(father.id)

        parts.append(DAUGHTER_OF if current.sex == "F" else SON_OF)
        parts.append(_link_name(father))

        current = father
        generations += 1

    surname = current.surname or person.surname
    if surname:
        parts.append(surname)

    return " ".join(parts)
