from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from pathgrammar.api.routes.health import router as health_router
from pathgrammar.api.routes.paths import router as paths_router
from pathgrammar.core.config import get_settings
from pathgrammar.core.logging import configure_logging


@asynccontextmanager
async def lifespan(_app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(paths_router, prefix="/api/v1")
    return app
