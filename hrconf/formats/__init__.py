"""Identifier format engine — validate, preview and generate from format strings.

Keep this package free of I/O. Everything here is a pure function of its
arguments (plus the clock, when no reference time is passed).
"""

from hrconf.formats.engine import InvalidFormatError, list_variables, validate  # noqa: F401
from hrconf.formats.generator import generate_id, next_sequence_number, parse_id  # noqa: F401
from hrconf.formats.preview import preview, preview_many  # noqa: F401
