"""
Multi-word name search for Arabic and Latin text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from gedcom_lineage.names.display import get_display_name
from gedcom_lineage.registry.entities import GedcomData, Individual

# Arabic harakat, tanwin, shadda, sukun and superscript alef
_DIACRITICS = re.compile("[\u064B-\u065F\u0670]")


def normalize_for_search(text: str) -> str:
    return _DIACRITICS.sub("", text.lower())


def matches_search(text: str, query: str) -> bool:
    """
    True when every whitespace-separated token of ``query`` occurs in
    ``text``, ignoring case and Arabic diacritics. A blank query matches.
    """
    tokens = query.split()
    if not tokens:
        return True

    haystack = normalize_for_search(text)
    return all(normalize_for_search(token) in haystack for token in tokens)


@dataclass(frozen=True)
class SearchMatch:
    id: str
    name: str
    dates: str = ""


def format_life_dates(person: Individual) -> str:
    if not (person.birth or person.death):
        return ""
    return f"{person.birth or '?'} - {person.death or ''}"


def search_individuals(data: GedcomData, query: Optional[str]) -> List[SearchMatch]:
    """Individuals whose display name matches ``query``; empty for a blank query."""
    if not query or not query.strip():
        return []

    matches: List[SearchMatch] = []
    for person in data.individuals.values():
        name = get_display_name(person)
        if matches_search(name, query):
            matches.append(SearchMatch(person.id, name, format_life_dates(person)))
    return matches
