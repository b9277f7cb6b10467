"""Illustrative previews of a format string.

Previews are for display while an administrator edits a format. They use
sample values for named placeholders (no organisation context is passed
in) and a counter that starts at 1 on every call. Nothing is shared between
calls, so re-rendering the same format never drifts.

Examples::

    preview("DOC-{YYYY}-{MM}-{###}", at=datetime(2024, 3, 15))
    # 'DOC-2024-03-001'

    preview_many("EMP{YY}-{DEPT}-{##}", 3, at=datetime(2024, 3, 15))
    # ['EMP24-ENG-01', 'EMP24-ENG-02', 'EMP24-ENG-03']
"""

from __future__ import annotations

from datetime import datetime

from hrconf.formats.engine import render, require_valid
from hrconf.formats.types import IdContext
from hrconf.settings import Settings, get_settings


def sample_context(sequence: int = 1, settings: Settings | None = None) -> IdContext:
    settings = settings or get_settings()
    return IdContext(
        sequence=sequence,
        department=settings.preview_department,
        location=settings.preview_location,
        employee_type=settings.preview_employee_type,
    )


def preview_many(
    format: str,
    count: int,
    at: datetime | None = None,
    settings: Settings | None = None,
) -> list[str]:
    """Expand ``format`` ``count`` times with counters 1..count.

    Raises InvalidFormatError when ``format`` does not validate and
    ValueError when ``count`` is negative.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    tokens = require_valid(format)
    # One reference point for the whole call so {YYYY} etc. stay fixed
    at = at or datetime.now()
    return [
        render(tokens, sample_context(sequence, settings), at)
        for sequence in range(1, count + 1)
    ]


def preview(format: str, at: datetime | None = None, settings: Settings | None = None) -> str:
    """Single preview, equivalent to ``preview_many(format, 1)[0]``."""
    return preview_many(format, 1, at=at, settings=settings)[0]
