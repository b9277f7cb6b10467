"""Company settings document — tagged-path updates and identifier format checks.

The settings editor keeps one large nested JSON document per organisation.
Field edits are applied as structural updates along an explicit path of
keys, returning a new tree each time:

    doc = apply_nested_input_change(doc, "documentConfig", "employeeIdFormat", "E{YY}-{####}")
    get_in(doc, ("documentConfig", "employeeIdFormat"))   # 'E{YY}-{####}'

A path whose intermediate key is missing, or points at a non-mapping,
raises PathError instead of quietly creating empty objects along the way.
Legacy dotted strings ("section.field.property") are converted once with
``parse_path`` at the boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from hrconf.formats.engine import validate
from hrconf.formats.types import ValidationResult

log = logging.getLogger(__name__)

FieldPath = tuple[str, ...]


class PathError(KeyError):
    """A tagged path does not resolve inside the settings tree."""

    def __init__(self, path: FieldPath, depth: int, reason: str):
        self.path = path
        self.depth = depth
        super().__init__(f"{'.'.join(path[: depth + 1])}: {reason}")


class DocumentConfig(BaseModel):
    """``documentConfig`` section — identifier formats for generated documents."""

    employee_id_format: str = Field(default="EMP{YYYY}-{###}", alias="employeeIdFormat")
    document_ref_format: str = Field(default="DOC-{YYYY}-{MM}-{###}", alias="documentRefFormat")
    invoice_number_format: str = Field(default="INV-{YYYY}-{###}", alias="invoiceNumberFormat")

    model_config = {"populate_by_name": True}


def parse_path(dotted: str) -> FieldPath:
    """Split a legacy dotted field path. Empty segments are rejected."""
    segments = tuple(dotted.split("."))
    if not dotted or any(not s for s in segments):
        raise ValueError(f"Malformed field path: {dotted!r}")
    return segments


def get_in(tree: Mapping[str, Any], path: FieldPath, default: Any = None) -> Any:
    node: Any = tree
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return default
        node = node[key]
    return node


def set_in(tree: Mapping[str, Any], path: FieldPath, value: Any) -> dict[str, Any]:
    """Return a copy of ``tree`` with ``value`` at ``path``; ``tree`` is untouched.

    Only the leaf key may be new. Every intermediate key must already exist
    and hold a mapping.
    """
    if not path:
        raise ValueError("Field path must have at least one segment")
    return _set(tree, path, 0, value)


def _set(node: Mapping[str, Any], path: FieldPath, depth: int, value: Any) -> dict[str, Any]:
    key = path[depth]
    updated = dict(node)
    if depth == len(path) - 1:
        updated[key] = value
        return updated
    if key not in node:
        raise PathError(path, depth, "missing section")
    child = node[key]
    if not isinstance(child, Mapping):
        raise PathError(path, depth, f"expected an object, found {type(child).__name__}")
    updated[key] = _set(child, path, depth + 1, value)
    return updated


def apply_input_change(tree: Mapping[str, Any], field: str, value: Any) -> dict[str, Any]:
    """Top-level field edit."""
    return set_in(tree, (field,), value)


def apply_nested_input_change(
    tree: Mapping[str, Any], section: str, field: str, value: Any,
) -> dict[str, Any]:
    """Edit one field inside a top-level section, keeping its siblings."""
    return set_in(tree, (section, field), value)


def check_document_config(config: DocumentConfig | Mapping[str, Any]) -> dict[str, ValidationResult]:
    """Validate every format in a ``documentConfig`` section, keyed by its JSON name."""
    if not isinstance(config, DocumentConfig):
        config = DocumentConfig.model_validate(config)
    results = {
        info.alias or name: validate(getattr(config, name))
        for name, info in DocumentConfig.model_fields.items()
    }
    invalid = [key for key, r in results.items() if not r.valid]
    if invalid:
        log.info("documentConfig has invalid formats: %s", ", ".join(invalid))
    return results
