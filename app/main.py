"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.api.router import api_router
from app.api.schemas.note import VALIDATION_MESSAGES
from app.core.config import Settings, settings as default_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middleware import add_middlewares
from app.repositories.note_repo import NoteRepository
from app.services.note_service import NoteService

_log = logging.getLogger("notes.startup")


@asynccontextmanager
async def _lifespan(app: FastAPI):
    _log.info("Notes API ready (notes in memory: %d)", app.state.note_repository.size())
    yield
    _log.info("Shutting down; discarding %d notes", app.state.note_repository.size())


def create_app(settings: Optional[Settings] = None, repository: Optional[NoteRepository] = None) -> FastAPI:
    """Construye una app aislada: repositorio y servicio propios, sin estado global."""
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, lifespan=_lifespan)
    app.state.settings = settings
    app.state.note_repository = repository if repository is not None else NoteRepository()
    app.state.note_service = NoteService(app.state.note_repository)

    add_middlewares(app, settings)
    register_exception_handlers(app, messages=VALIDATION_MESSAGES)

    # Monta routers bajo el prefijo configurado
    app.include_router(api_router, prefix=settings.api_prefix_normalized)
    return app


app = create_app()


if __name__ == "__main__":
    _log.info("Notes API listening on http://%s:%s", default_settings.host, default_settings.port)
    # uvicorn atiende SIGINT/SIGTERM con apagado ordenado
    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_level=default_settings.log_level.lower())
