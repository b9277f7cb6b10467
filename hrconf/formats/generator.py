"""Identifier generation against real context.

Where ``preview`` shows sample output, these helpers produce and read real
identifiers:

  generate_id          — expand a format with an IdContext
  next_sequence_number — next counter value given identifiers already issued
  parse_id             — recover year/month/day/sequence/codes from an identifier

Examples::

    generate_id("EMP{YYYY}-{DEPT}-{###}", IdContext(sequence=7, department="hr"))
    # 'EMP2024-HR-007'

    next_sequence_number("EMP{YYYY}-{###}", ["EMP2024-001", "EMP2024-009"],
                         at=datetime(2024, 5, 1))
    # 10

    parse_id("EMP24-ENG-042", "EMP{YY}-{DEPT}-{###}")
    # ParsedId(year=2024, sequence=42, department='ENG', ...)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime

from hrconf.formats.engine import named_max_len, render, require_valid
from hrconf.formats.types import IdContext, ParsedId, Token, TokenKind

log = logging.getLogger(__name__)

# placeholder name → regex group name
_GROUPS = {
    "YYYY": "year",
    "YY": "short_year",
    "MM": "month",
    "DD": "day",
    "DEPT": "department",
    "LOC": "location",
    "TYPE": "employee_type",
}

_DIGITS = {"YYYY": 4, "YY": 2, "MM": 2, "DD": 2}


def generate_id(
    format: str,
    context: IdContext | None = None,
    at: datetime | None = None,
) -> str:
    """Expand ``format`` with real values. Raises InvalidFormatError if invalid."""
    tokens = require_valid(format)
    return render(tokens, context or IdContext(), at or datetime.now())


def _matcher(tokens: list[Token], at: datetime | None) -> re.Pattern[str]:
    """Build a full-match regex for identifiers produced by ``tokens``.

    With ``at`` set, date placeholders are pinned to that date so only
    identifiers from the same period match. The first counter is captured
    as ``sequence``; repeated named placeholders must repeat the same value.
    """
    parts: list[str] = []
    seen: set[str] = set()
    counter_seen = False
    for token in tokens:
        name = token.name or ""
        if token.kind is TokenKind.LITERAL:
            parts.append(re.escape(token.text))
        elif token.kind is TokenKind.COUNTER:
            digits = f"[0-9]{{{token.width},}}"
            parts.append(digits if counter_seen else f"(?P<sequence>{digits})")
            counter_seen = True
        elif token.kind in (TokenKind.YEAR, TokenKind.MONTH, TokenKind.DAY) and at is not None:
            parts.append(re.escape(render([token], IdContext(), at)))
        else:
            group = _GROUPS[name]
            if group in seen:
                parts.append(f"(?P={group})")
                continue
            seen.add(group)
            if token.kind is TokenKind.NAMED:
                # Lazy so an overflowed counter that follows keeps all its digits
                parts.append(f"(?P<{group}>[A-Za-z0-9]{{0,{named_max_len(name)}}}?)")
            else:
                parts.append(f"(?P<{group}>[0-9]{{{_DIGITS[name]}}})")
    return re.compile("".join(parts))


def next_sequence_number(
    format: str,
    existing_ids: Iterable[str],
    at: datetime | None = None,
) -> int:
    """Highest sequence among ``existing_ids`` for the current period, plus one.

    Identifiers from other periods (different year/month/day, as far as the
    format encodes them) or that don't fit the format are ignored. Returns 1
    when the format has no counter or nothing matches.
    """
    tokens = require_valid(format)
    if not any(t.kind is TokenKind.COUNTER for t in tokens):
        return 1

    pattern = _matcher(tokens, at or datetime.now())
    highest = 0
    for identifier in existing_ids:
        match = pattern.fullmatch(identifier)
        if match:
            highest = max(highest, int(match.group("sequence")))
    log.debug("Next sequence for %r: %d", format, highest + 1)
    return highest + 1


def parse_id(identifier: str, format: str) -> ParsedId | None:
    """Extract the placeholder values from ``identifier``, or None if it doesn't fit."""
    tokens = require_valid(format)
    match = _matcher(tokens, None).fullmatch(identifier)
    if match is None:
        return None

    values = match.groupdict()
    parsed = ParsedId()
    if values.get("year"):
        parsed.year = int(values["year"])
    elif values.get("short_year"):
        parsed.year = 2000 + int(values["short_year"])
    if values.get("month"):
        parsed.month = int(values["month"])
    if values.get("day"):
        parsed.day = int(values["day"])
    if values.get("sequence"):
        parsed.sequence = int(values["sequence"])
    parsed.department = values.get("department") or None
    parsed.location = values.get("location") or None
    parsed.employee_type = values.get("employee_type") or None
    return parsed
