"""FastAPI application — lifespan, middleware, routers."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import hrconf
from hrconf.settings import Settings, get_settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(app.state.settings)
    logging.getLogger("hrconf.startup").info(
        "Format API mounted at %s", app.state.settings.api_base_path,
    )
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    boot_settings = settings or get_settings()

    app = FastAPI(title="hrconf", version=hrconf.__version__, lifespan=lifespan)
    app.state.settings = boot_settings

    origins = [o.strip() for o in boot_settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from hrconf.api.routers import formats

    app.include_router(formats.router, prefix=boot_settings.api_base_path, tags=["formats"])

    @app.get("/health")
    async def root_health():
        return {"status": "ok", "version": hrconf.__version__}

    return app


app = create_app()
