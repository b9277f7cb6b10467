"""FastAPI dependency injection — shared accessors."""

from __future__ import annotations

from fastapi import Request

from hrconf.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
