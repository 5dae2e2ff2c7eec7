"""
Endpoints para `notes`.

`/notes/search` se declara antes que `/notes/{note_id}` para que el segmento
literal nunca se interprete como id.
"""
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.api.deps import get_note_service
from app.api.schemas.note import TAG_MAX, TAG_PATTERN, UUID_PATTERN, NoteCreate, NoteOut, NoteUpdate
from app.services.note_service import NoteService

# El id llega tal cual lo envió el cliente; solo se valida el formato
NoteId = Annotated[str, Path(pattern=UUID_PATTERN)]


router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get(
    "/search",
    response_model=List[NoteOut],
    summary="Buscar notas por tag",
    description="Devuelve las notas que tienen el tag indicado (obligatorio).",
)
async def search_notes(
    tag: str = Query(..., min_length=1, max_length=TAG_MAX, pattern=TAG_PATTERN),
    service: NoteService = Depends(get_note_service),
):
    return service.search_by_tag(tag)


@router.get(
    "",
    response_model=List[NoteOut],
    summary="Listar notas",
    description="Lista todas las notas con filtro opcional por tag.",
)
async def list_notes(
    tag: Optional[str] = Query(default=None, min_length=1, max_length=TAG_MAX, pattern=TAG_PATTERN),
    service: NoteService = Depends(get_note_service),
):
    return service.list_notes(tag)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteOut,
    summary="Crear nota",
)
async def create_note(payload: NoteCreate, service: NoteService = Depends(get_note_service)):
    return service.create(payload.model_dump())


@router.get("/{note_id}", response_model=NoteOut, summary="Obtener nota")
async def get_note(note_id: NoteId, service: NoteService = Depends(get_note_service)):
    return service.get(note_id)


@router.patch(
    "/{note_id}",
    response_model=NoteOut,
    summary="Actualizar nota (parcial)",
    description="Actualiza solo los campos enviados; debe venir al menos uno.",
)
async def update_note(note_id: NoteId, payload: NoteUpdate, service: NoteService = Depends(get_note_service)):
    return service.update(note_id, payload.changes())


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar nota")
async def delete_note(note_id: NoteId, service: NoteService = Depends(get_note_service)):
    service.delete(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
