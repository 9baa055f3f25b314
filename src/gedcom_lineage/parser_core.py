"""
parser_core.py
Record parser: GEDCOM text -> GedcomData.

The token stream is folded through an explicit ``ParseState`` accumulator.
Only the INDI/FAM subset is modeled; every other line is ignored and
nothing in here raises on bad input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Dict, Iterable, Optional, Union

from gedcom_lineage.dates.normalizer import format_gedcom_date
from gedcom_lineage.loader.tokenizer import Token, tokenize_text
from gedcom_lineage.logging import get_logger
from gedcom_lineage.registry.entities import Family, GedcomData, Individual

log = get_logger("parser_core")

_SURNAME = re.compile(r"/([^/]*)/")
PRIVATE_NAME = "PRIVATE"

Record = Union[Individual, Family]


@dataclass
class ParseState:
    """
    Accumulator threaded through the line fold.

    ``current_id``/``current_kind`` point at the record being filled
    ("INDI" or "FAM"); ``sub_tag`` is the active level-1 tag that level-2
    lines refine.
    """
    individuals: Dict[str, Individual] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)
    current_id: Optional[str] = None
    current_kind: Optional[str] = None
    sub_tag: Optional[str] = None
    lines: int = 0

    def current(self) -> Optional[Record]:
        if self.current_kind == "INDI":
            return self.individuals.get(self.current_id)
        if self.current_kind == "FAM":
            return self.families.get(self.current_id)
        return None

    def store(self, record: Record) -> None:
        if isinstance(record, Individual):
            self.individuals[record.id] = record
        else:
            self.families[record.id] = record

    def close_record(self) -> None:
        self.current_id = None
        self.current_kind = None

    def freeze(self) -> GedcomData:
        return GedcomData(individuals=self.individuals, families=self.families)


# ---------------------------------------------------------
# NAME handling
# ---------------------------------------------------------
def apply_name(person: Individual, raw_name: str) -> Individual:
    """
    Apply a ``1 NAME`` value: "Given /Surname/" -> name "Given Surname".

    Given/surname are only derived when a /surname/ pair is present.
    """
    clean = raw_name.replace("/", "").strip()
    changes = {"name": clean}

    m = _SURNAME.search(raw_name)
    if m:
        changes["surname"] = m.group(1).strip()
        changes["given_name"] = raw_name[: raw_name.index("/")].strip()

    if clean.upper() == PRIVATE_NAME:
        changes["is_private"] = True

    return replace(person, **changes)


# ---------------------------------------------------------
# Level handlers
# ---------------------------------------------------------
def _open_record(state: ParseState, token: Token) -> None:
    state.sub_tag = None
    if token.tag == "INDI" and token.pointer:
        state.store(Individual(id=token.pointer))
        state.current_id, state.current_kind = token.pointer, "INDI"
    elif token.tag == "FAM" and token.pointer:
        state.store(Family(id=token.pointer))
        state.current_id, state.current_kind = token.pointer, "FAM"
    else:
        state.close_record()


def _individual_fact(person: Individual, tag: str, value: str) -> Individual:
    if tag == "NAME":
        return apply_name(person, value)
    if tag == "SEX":
        return replace(person, sex=value if value in ("M", "F") else None)
    if tag == "DEAT":
        return replace(person, is_deceased=True)
    if tag == "FAMS" and value:
        return replace(person, families_as_spouse=person.families_as_spouse + (value,))
    if tag == "FAMC" and value:
        return replace(person, family_as_child=value)
    return person


def _family_fact(family: Family, tag: str, value: str) -> Family:
    if tag == "HUSB":
        return replace(family, husband=value or None)
    if tag == "WIFE":
        return replace(family, wife=value or None)
    if tag == "CHIL" and value:
        return replace(family, children=family.children + (value,))
    return family


def _individual_detail(person: Individual, sub_tag: Optional[str], tag: str, value: str) -> Individual:
    if sub_tag == "NAME":
        if tag == "GIVN":
            return replace(person, given_name=value)
        if tag == "SURN":
            return replace(person, surname=value)
    elif tag == "DATE":
        if sub_tag == "BIRT":
            return replace(person, birth=format_gedcom_date(value))
        if sub_tag == "DEAT":
            return replace(person, death=format_gedcom_date(value))
    return person


def step(state: ParseState, token: Token) -> ParseState:
    """Fold one token into the accumulator."""
    state.lines += 1

    if token.level == 0:
        _open_record(state, token)
        return state

    record = state.current()
    if record is None:
        return state

    if token.level == 1:
        state.sub_tag = token.tag
        if isinstance(record, Individual):
            state.store(_individual_fact(record, token.tag, token.value))
        else:
            state.store(_family_fact(record, token.tag, token.value))
    elif token.level == 2 and isinstance(record, Individual):
        state.store(_individual_detail(record, state.sub_tag, token.tag, token.value))

    return state


# ---------------------------------------------------------
# Entry points
# ---------------------------------------------------------
def parse_tokens(tokens: Iterable[Token]) -> GedcomData:
    state = reduce(step, tokens, ParseState())
    data = state.freeze()
    log.info(
        "Parsed %d lines: INDI=%d FAM=%d",
        state.lines,
        len(data.individuals),
        len(data.families),
    )
    return data


def parse_gedcom(text: str) -> GedcomData:
    """Parse GEDCOM source text. Never raises on malformed input."""
    return parse_tokens(tokenize_text(text or ""))
