"""
Service layer for notes: identity, timestamps and not-found translation over the repository.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from app.core.exceptions import NotFoundError
from app.core.time import now_iso
from app.repositories.note_repo import NoteRepository

log = logging.getLogger("notes.service")


def _not_found(note_id: str) -> NotFoundError:
    return NotFoundError(f'Note with id "{note_id}" not found')


class NoteService:
    def __init__(self, repository: NoteRepository) -> None:
        self.repository = repository

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Crea la nota con id y timestamps generados en el servidor."""
        now = now_iso()
        note = {
            "id": str(uuid.uuid4()),
            "title": data["title"],
            "body": data["body"],
            "tags": list(data.get("tags") or []),
            "created_at": now,
            "updated_at": now,
        }
        created = self.repository.create(note)
        log.info("Note created id=%s tags=%d", created["id"], len(created["tags"]))
        return created

    def list_notes(self, tag: Optional[str] = None) -> List[Dict[str, Any]]:
        """Todas las notas en orden de inserción; con `tag`, filtradas por ese tag."""
        return self.repository.find_all(tag)

    def search_by_tag(self, tag: str) -> List[Dict[str, Any]]:
        """Igual que `list_notes` pero con el tag obligatorio."""
        return self.repository.find_all(tag)

    def get(self, note_id: str) -> Dict[str, Any]:
        note = self.repository.find_by_id(note_id)
        if note is None:
            raise _not_found(note_id)
        return note

    def update(self, note_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        if self.repository.find_by_id(note_id) is None:
            raise _not_found(note_id)
        updated = self.repository.update(note_id, {**changes, "updated_at": now_iso()})
        # Pudo borrarse entre la lectura y la escritura
        if updated is None:
            raise _not_found(note_id)
        log.info("Note updated id=%s fields=%s", note_id, ",".join(sorted(changes)))
        return updated

    def delete(self, note_id: str) -> None:
        if not self.repository.delete(note_id):
            raise _not_found(note_id)
        log.info("Note deleted id=%s", note_id)
