from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Literal, Mapping, Optional, Tuple

Sex = Literal["M", "F"]


# -----------------------------
# Records
# -----------------------------

@dataclass(frozen=True, slots=True)
class Individual:
    """
    One INDI record.

    ``birth``/``death`` hold normalized display dates (``DD/MM/YYYY``,
    ``MM/YYYY`` or the raw value) or None when no date was recorded.
    ``sex`` is None when unknown.
    """
    id: str
    name: str = ""
    given_name: str = ""
    surname: str = ""
    sex: Optional[Sex] = None
    birth: Optional[str] = None
    death: Optional[str] = None
    is_deceased: bool = False
    is_private: bool = False

    # FAMS pointers in file order
    families_as_spouse: Tuple[str, ...] = ()
    # Last FAMC pointer seen
    family_as_child: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Family:
    id: str
    husband: Optional[str] = None
    wife: Optional[str] = None
    # CHIL pointers in file order, duplicates kept
    children: Tuple[str, ...] = ()

    def parents(self) -> Tuple[str, ...]:
        return tuple(p for p in (self.husband, self.wife) if p)

    def spouse_of(self, person_id: str) -> Optional[str]:
        return self.wife if self.husband == person_id else self.husband


# -----------------------------
# Snapshot
# -----------------------------

def _freeze(records: Mapping) -> Mapping:
    if isinstance(records, MappingProxyType):
        return records
    return MappingProxyType(dict(records))


@dataclass(frozen=True)
class GedcomData:
    """
    Immutable id-keyed store of every parsed record.

    Built once per source text; every derived view reads from it and none
    writes back.
    """
    individuals: Mapping[str, Individual] = field(default_factory=dict)
    families: Mapping[str, Family] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "individuals", _freeze(self.individuals))
        object.__setattr__(self, "families", _freeze(self.families))

    def get_individual(self, person_id: Optional[str]) -> Optional[Individual]:
        if not person_id:
            return None
        return self.individuals.get(person_id)

    def get_family(self, family_id: Optional[str]) -> Optional[Family]:
        if not family_id:
            return None
        return self.families.get(family_id)

    def spouse_families(self, person: Individual) -> Iterator[Family]:
        """Resolved FAMS families of ``person``; dangling pointers are skipped."""
        for family_id in person.families_as_spouse:
            family = self.families.get(family_id)
            if family is not None:
                yield family

    def __len__(self) -> int:  # pragma: no cover - trivial wrapper
        return len(self.individuals)


@dataclass(frozen=True, slots=True)
class RootAncestor:
    """Root-selector entry: an id plus the text shown for it."""
    id: str
    text: str

    def as_dict(self) -> Dict[str, str]:
        return {"id": self.id, "text": self.text}
