"""Application factory for the Libros API (``uvicorn libros_api.app:app``)."""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from libros_api.core.config import get_settings
from libros_api.core.logging_setup import configure_logging
from libros_api.db.create_tables import create_all
from libros_api.routers import libros as libros_router
from libros_api.services.libro_service import LibroService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.auto_create_tables:
        tables = create_all()
        logger.info("Schema ready: {}", ", ".join(tables))
    logger.info("Libros API started (env={})", settings.app_env)
    yield


def create_app(service: LibroService | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging()

    app = FastAPI(title="Libros API", version="0.1.0", lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.state.libro_service = service or LibroService()

    @app.get("/health")
    def healthcheck():
        return {"status": "ok"}

    app.include_router(libros_router.router)
    return app


app = create_app()
