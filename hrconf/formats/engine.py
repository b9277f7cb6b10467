"""Format string scanning, validation and expansion.

The recognized placeholder vocabulary is declared once in ``_VOCABULARY``
(plus the ``{#…#}`` counter class). ``validate`` accepts exactly what that
table names and ``list_variables`` documents exactly what it names, so the
help text shown to an editor cannot drift from what the validator allows.

Usage::

    from hrconf.formats.engine import validate, list_variables

    validate("EMP{YYYY}-{###}")      # ValidationResult(valid=True, errors=[])
    validate("EMP{BOGUS}-{###}")     # errors=["Unknown placeholder: {BOGUS}"]
    list_variables()                 # [FormatVariable(placeholder="{YYYY}", ...), ...]
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime

from hrconf.formats.types import (
    FormatIssue,
    FormatVariable,
    IdContext,
    IssueCode,
    Token,
    TokenKind,
    ValidationResult,
)

log = logging.getLogger(__name__)

_BRACE_RE = re.compile(r"[{}]")
_COUNTER_RE = re.compile(r"#+")


@dataclass(frozen=True)
class _Variable:
    kind: TokenKind
    description: str
    example: str
    field: str | None = None  # IdContext attribute for named placeholders
    max_len: int = 0
    default: str = ""


_VOCABULARY: dict[str, _Variable] = {
    "YYYY": _Variable(TokenKind.YEAR, "Full year (4 digits)", "2024"),
    "YY": _Variable(TokenKind.YEAR, "Short year (2 digits)", "24"),
    "MM": _Variable(TokenKind.MONTH, "Month (01-12)", "01"),
    "DD": _Variable(TokenKind.DAY, "Day (01-31)", "15"),
    "DEPT": _Variable(TokenKind.NAMED, "Department code (3 chars)", "ENG", "department", 3),
    "LOC": _Variable(TokenKind.NAMED, "Location code (2 chars)", "NY", "location", 2),
    "TYPE": _Variable(TokenKind.NAMED, "Employee type (3 chars)", "EMP", "employee_type", 3, "EMP"),
}

# Counter widths called out in the help list; any run of '#' is accepted
_DOCUMENTED_COUNTER_WIDTHS = (3, 4)


class InvalidFormatError(ValueError):
    """Raised when expansion is requested for a format that fails validation."""

    def __init__(self, format: str, result: ValidationResult):
        self.format = format
        self.result = result
        super().__init__(f"Invalid format {format!r}: {', '.join(result.errors)}")


def is_counter(name: str) -> bool:
    return bool(_COUNTER_RE.fullmatch(name))


def recognizes(placeholder: str) -> bool:
    """True when ``placeholder`` (braces included) is a known token."""
    if len(placeholder) < 3 or placeholder[0] != "{" or placeholder[-1] != "}":
        return False
    name = placeholder[1:-1]
    return name in _VOCABULARY or is_counter(name)


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


def _invalid(code: IssueCode, message: str, text: str, position: int) -> Token:
    issue = FormatIssue(code=code, message=message, position=position)
    return Token(kind=TokenKind.INVALID, text=text, position=position, issue=issue)


def _placeholder(name: str, text: str, position: int) -> Token:
    if not name:
        return _invalid(IssueCode.EMPTY_PLACEHOLDER, "Empty placeholder", text, position)
    if is_counter(name):
        return Token(kind=TokenKind.COUNTER, text=text, name=name, position=position)
    variable = _VOCABULARY.get(name)
    if variable is None:
        return _invalid(
            IssueCode.UNKNOWN_PLACEHOLDER, f"Unknown placeholder: {text}", text, position,
        )
    return Token(kind=variable.kind, text=text, name=name, position=position)


def tokenize(format: str) -> list[Token]:
    """Split a format string into literal, placeholder and invalid tokens.

    A ``{`` that reaches the end of the string, or another ``{``, before
    closing is unterminated; scanning resumes at the next ``{``.
    """
    tokens: list[Token] = []
    literal_start = 0
    i = 0

    def flush(end: int) -> None:
        if end > literal_start:
            tokens.append(Token(kind=TokenKind.LITERAL, text=format[literal_start:end], position=literal_start))

    while i < len(format):
        ch = format[i]
        if ch == "{":
            flush(i)
            match = _BRACE_RE.search(format, i + 1)
            if match is None or match.group() == "{":
                end = match.start() if match else len(format)
                tokens.append(_invalid(
                    IssueCode.UNTERMINATED_PLACEHOLDER, "Unterminated placeholder", format[i:end], i,
                ))
                i = end
            else:
                close = match.start()
                tokens.append(_placeholder(format[i + 1:close], format[i:close + 1], i))
                i = close + 1
            literal_start = i
        elif ch == "}":
            flush(i)
            tokens.append(_invalid(IssueCode.UNMATCHED_BRACE, "Unmatched closing brace", ch, i))
            i += 1
            literal_start = i
        else:
            i += 1
    flush(len(format))
    return tokens


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _result(tokens: list[Token]) -> ValidationResult:
    issues = [t.issue for t in tokens if t.issue is not None]
    return ValidationResult(
        valid=not issues,
        errors=[i.message for i in issues],
        issues=issues,
    )


def validate(format: str) -> ValidationResult:
    """Validate a format string. Never raises; problems come back in ``errors``."""
    result = _result(tokenize(format))
    if not result.valid:
        log.debug("Format %r rejected: %s", format, result.errors)
    return result


def require_valid(format: str) -> list[Token]:
    """Tokenize ``format`` or raise InvalidFormatError if it does not validate."""
    tokens = tokenize(format)
    result = _result(tokens)
    if not result.valid:
        log.warning("Expansion requested for invalid format %r", format)
        raise InvalidFormatError(format, result)
    return tokens


def list_variables() -> list[FormatVariable]:
    """Help entries for every recognized placeholder, in display order."""
    entries = [
        FormatVariable(placeholder=f"{{{name}}}", description=v.description, example=v.example)
        for name, v in _VOCABULARY.items()
        if v.kind is not TokenKind.NAMED
    ]
    entries.extend(
        FormatVariable(
            placeholder="{" + "#" * width + "}",
            description=f"Sequential number ({width} digits; one # per digit, any width)",
            example=str(1).zfill(width),
        )
        for width in _DOCUMENTED_COUNTER_WIDTHS
    )
    entries.extend(
        FormatVariable(placeholder=f"{{{name}}}", description=v.description, example=v.example)
        for name, v in _VOCABULARY.items()
        if v.kind is TokenKind.NAMED
    )
    return entries


def help_entry_for(placeholder: str) -> FormatVariable | None:
    """The help entry documenting ``placeholder``, or None if it isn't recognized.

    Counters of any width map to the counter class entries.
    """
    if not recognizes(placeholder):
        return None
    entries = list_variables()
    for entry in entries:
        if entry.placeholder == placeholder:
            return entry
    if is_counter(placeholder[1:-1]):
        return next(e for e in entries if is_counter(e.placeholder[1:-1]))
    return None


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


def named_max_len(name: str) -> int:
    return _VOCABULARY[name].max_len


def named_value(name: str, context: IdContext) -> str:
    """Resolve a named placeholder: upper-cased and cut to its max length."""
    variable = _VOCABULARY[name]
    raw = getattr(context, variable.field or "", None) or variable.default
    return raw.upper()[: variable.max_len]


def render(tokens: list[Token], context: IdContext, at: datetime) -> str:
    """Expand already-validated tokens against a context and reference time."""
    sequence = context.sequence or 1
    parts: list[str] = []
    for token in tokens:
        if token.kind is TokenKind.LITERAL:
            parts.append(token.text)
        elif token.kind is TokenKind.YEAR:
            parts.append(f"{at.year:04d}" if token.name == "YYYY" else f"{at.year % 100:02d}")
        elif token.kind is TokenKind.MONTH:
            parts.append(f"{at.month:02d}")
        elif token.kind is TokenKind.DAY:
            parts.append(f"{at.day:02d}")
        elif token.kind is TokenKind.NAMED:
            parts.append(named_value(token.name or "", context))
        elif token.kind is TokenKind.COUNTER:
            parts.append(str(sequence).zfill(token.width))
        else:
            raise InvalidFormatError("".join(t.text for t in tokens), _result(tokens))
    return "".join(parts)
