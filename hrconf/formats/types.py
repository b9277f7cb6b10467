"""Format engine types — tokens, validation results, help entries, contexts.

A format string such as ``EMP{YYYY}-{DEPT}-{###}`` is scanned into a flat
list of tokens:

  literal  — text copied through verbatim
  year     — ``{YYYY}`` / ``{YY}``
  month    — ``{MM}``
  day      — ``{DD}``
  named    — ``{DEPT}`` / ``{LOC}`` / ``{TYPE}`` (resolved from an IdContext)
  counter  — ``{#…#}``, width = number of ``#``

Malformed runs (unknown names, ``{}``, a ``{`` that never closes, a stray
``}``) become ``invalid`` tokens carrying the issue that explains them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TokenKind(str, Enum):
    LITERAL = "literal"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    NAMED = "named"
    COUNTER = "counter"
    INVALID = "invalid"


class IssueCode(str, Enum):
    UNKNOWN_PLACEHOLDER = "unknown_placeholder"
    UNTERMINATED_PLACEHOLDER = "unterminated_placeholder"
    EMPTY_PLACEHOLDER = "empty_placeholder"
    UNMATCHED_BRACE = "unmatched_brace"


class FormatIssue(BaseModel):
    """One problem found while scanning a format string."""

    code: IssueCode
    message: str
    position: int  # offset of the offending brace in the format string


class Token(BaseModel):
    kind: TokenKind
    text: str  # raw source text, braces included for placeholders
    name: str | None = None  # placeholder body, e.g. "YYYY" or "###"
    position: int = 0
    issue: FormatIssue | None = None

    @property
    def width(self) -> int:
        """Zero-pad width for counters, 0 for everything else."""
        if self.kind is TokenKind.COUNTER and self.name:
            return len(self.name)
        return 0


class ValidationResult(BaseModel):
    """Outcome of validating a format string. ``errors`` is ordered by position."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    issues: list[FormatIssue] = Field(default_factory=list)


class FormatVariable(BaseModel):
    """A help entry shown next to a format input."""

    placeholder: str
    description: str
    example: str


class IdContext(BaseModel):
    """Real values for the non-temporal placeholders."""

    sequence: int | None = Field(default=None, ge=1)
    department: str | None = None
    location: str | None = None
    employee_type: str | None = None


class ParsedId(BaseModel):
    """Fields recovered from an identifier by matching it against its format."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    sequence: int | None = None
    department: str | None = None
    location: str | None = None
    employee_type: str | None = None
