from __future__ import annotations

from .entities import Family, GedcomData, Individual, RootAncestor, Sex

__all__ = [
    "Family",
    "GedcomData",
    "Individual",
    "RootAncestor",
    "Sex",
]
