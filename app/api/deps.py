"""
Dependencias reutilizables para routers (FastAPI Depends).

- El servicio vive en `app.state`, creado por `create_app`; cada app tiene el suyo.
- Mantener esta capa delgada: sin lógica de negocio.
"""
from fastapi import Request

from app.services.note_service import NoteService


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service
