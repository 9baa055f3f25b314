# src/gedcom_lineage/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from gedcom_lineage.logging import get_logger

log = get_logger("tokenizer")

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_LEVEL = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the source text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "CHIL".
        value: The line payload with internal whitespace collapsed (may be empty).
        raw: The original line content without line-break characters.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be read as LEVEL [@XREF@] TAG [VALUE]."""


def _is_pointer(part: str) -> bool:
    return len(part) >= 2 and part.startswith("@") and part.endswith("@")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    The line is trimmed and split on runs of whitespace:
        <level> [<pointer>] <tag> [<value ...>]

    The value is re-joined with single spaces, so "1 NAME  John   /Doe/"
    yields value "John /Doe/".

    A level-0 line without a tag still yields a token (tag ""), so the
    record being read is closed rather than extended.

    Examples:
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE 1 JAN 1990"
    """
    raw = line.rstrip("\r\n")

    # Handle optional UTF-8 BOM on the very first line.
    text = raw.lstrip("\ufeff") if lineno <= 1 else raw

    parts = text.split()
    if not parts:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    level_str = parts[0]
    if not _LEVEL.fullmatch(level_str):
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    pointer: Optional[str] = None
    rest = parts[1:]
    if rest and _is_pointer(rest[0]):
        pointer, rest = rest[0], rest[1:]

    level = int(level_str)
    if not rest and level != 0:
        raise GedcomSyntaxError(f"Line {lineno}: missing tag -> {raw!r}")

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=rest[0] if rest else "",
        value=" ".join(rest[1:]),
        raw=raw,
    )


def iter_lines(text: str) -> Iterator[str]:
    """Split source text on CRLF, CR or LF line breaks."""
    return iter(_LINE_BREAK.split(text))


def tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    """
    Yield a Token for every readable line; blank and malformed lines are skipped.

    Never raises for bad input: the skip is logged at DEBUG so a noisy file
    can be inspected with ``debug: true``.
    """
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield tokenize_line(line, lineno=lineno)
        except GedcomSyntaxError as exc:
            log.debug("Skipping line: %s", exc)


def tokenize_text(text: str) -> Iterator[Token]:
    """Tokenize already-loaded GEDCOM source text."""
    return tokenize_lines(iter_lines(text))
