"""Identifier format endpoints — validate, preview, help, generate, parse."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from hrconf.api.deps import get_settings
from hrconf.formats.engine import InvalidFormatError, list_variables, validate
from hrconf.formats.generator import generate_id, next_sequence_number, parse_id
from hrconf.formats.preview import preview_many
from hrconf.formats.types import FormatVariable, IdContext, ParsedId, ValidationResult
from hrconf.services.company_settings import DocumentConfig, check_document_config
from hrconf.settings import Settings

router = APIRouter()


class FormatRequest(BaseModel):
    format: str


class PreviewRequest(BaseModel):
    format: str
    count: int | None = Field(default=None, ge=1)  # None → settings.preview_default_count
    at: datetime | None = None  # reference time; defaults to now


class PreviewResponse(BaseModel):
    format: str
    preview: str
    examples: list[str]


class GenerateRequest(BaseModel):
    format: str
    context: IdContext = Field(default_factory=IdContext)
    at: datetime | None = None


class NextSequenceRequest(BaseModel):
    format: str
    existing_ids: list[str] = Field(default_factory=list)
    at: datetime | None = None


class ParseRequest(BaseModel):
    format: str
    identifier: str


def _invalid(exc: InvalidFormatError) -> HTTPException:
    return HTTPException(422, {"message": "Invalid format", "errors": exc.result.errors})


@router.post("/validate", response_model=ValidationResult)
async def validate_format(body: FormatRequest):
    return validate(body.format)


@router.post("/preview", response_model=PreviewResponse)
async def preview_format(body: PreviewRequest, settings: Settings = Depends(get_settings)):
    count = body.count or settings.preview_default_count
    if count > settings.preview_max_count:
        message = f"count must be <= {settings.preview_max_count}"
        raise HTTPException(422, {"message": message, "errors": [message]})
    try:
        examples = preview_many(body.format, count, at=body.at, settings=settings)
    except InvalidFormatError as exc:
        raise _invalid(exc)
    return PreviewResponse(format=body.format, preview=examples[0], examples=examples)


@router.get("/variables", response_model=list[FormatVariable])
async def format_variables():
    return list_variables()


@router.post("/generate")
async def generate(body: GenerateRequest):
    try:
        return {"id": generate_id(body.format, body.context, at=body.at)}
    except InvalidFormatError as exc:
        raise _invalid(exc)


@router.post("/next-sequence")
async def next_sequence(body: NextSequenceRequest):
    try:
        return {"next": next_sequence_number(body.format, body.existing_ids, at=body.at)}
    except InvalidFormatError as exc:
        raise _invalid(exc)


@router.post("/parse", response_model=ParsedId)
async def parse(body: ParseRequest):
    try:
        parsed = parse_id(body.identifier, body.format)
    except InvalidFormatError as exc:
        raise _invalid(exc)
    if parsed is None:
        raise HTTPException(404, "Identifier does not match format")
    return parsed


@router.post("/document-config/check", response_model=dict[str, ValidationResult])
async def check_config(config: DocumentConfig):
    return check_document_config(config)
