"""Repo en memoria para `notes`.

El repositorio es dueño exclusivo de sus registros: todo lo que entra o sale
se copia, así ningún llamador puede alterar el estado interno por referencia.
"""
import copy
from typing import Any, Dict, List, Optional

from app.core.exceptions import ConflictError

# Campos que `update` puede sobreescribir
UPDATABLE_FIELDS = ("title", "body", "tags", "updated_at")


class NoteRepository:
    def __init__(self) -> None:
        self._store: Dict[str, Dict[str, Any]] = {}

    def create(self, note: Dict[str, Any]) -> Dict[str, Any]:
        """Inserta una nota nueva; ConflictError si el id ya existe."""
        note_id = note["id"]
        if note_id in self._store:
            raise ConflictError(f'Note with id "{note_id}" already exists')
        self._store[note_id] = copy.deepcopy(note)
        return copy.deepcopy(note)

    def find_by_id(self, note_id: str) -> Optional[Dict[str, Any]]:
        note = self._store.get(note_id)
        return copy.deepcopy(note) if note is not None else None

    def find_all(self, tag: Optional[str] = None) -> List[Dict[str, Any]]:
        """Todas las notas en orden de inserción; con `tag`, solo las que lo tienen (sin distinguir mayúsculas)."""
        notes = self._store.values()
        if tag is None:
            return [copy.deepcopy(n) for n in notes]
        wanted = tag.lower()
        return [copy.deepcopy(n) for n in notes if any(t.lower() == wanted for t in n.get("tags", []))]

    def update(self, note_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Mezcla solo los campos enviados. No valida valores: eso es del llamador."""
        existing = self._store.get(note_id)
        if existing is None:
            return None
        for key in UPDATABLE_FIELDS:
            if key in patch:
                existing[key] = copy.deepcopy(patch[key])
        return copy.deepcopy(existing)

    def delete(self, note_id: str) -> bool:
        return self._store.pop(note_id, None) is not None

    def size(self) -> int:
        return len(self._store)

    def clear(self) -> None:
        self._store.clear()
