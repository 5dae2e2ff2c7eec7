"""Shared fixtures: every test gets its own app, repository and client."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.repositories.note_repo import NoteRepository
from app.services.note_service import NoteService


@pytest.fixture()
def repository() -> NoteRepository:
    return NoteRepository()


@pytest.fixture()
def service(repository: NoteRepository) -> NoteService:
    return NoteService(repository)


@pytest.fixture()
def client(repository: NoteRepository):
    app = create_app(Settings(_env_file=None), repository=repository)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_note(client: TestClient):
    """POST a note and return the decoded response body."""

    def _make(title: str = "Title", body: str = "Body", tags=None) -> dict:
        payload = {"title": title, "body": body}
        if tags is not None:
            payload["tags"] = tags
        res = client.post("/notes", json=payload)
        assert res.status_code == 201, res.text
        return res.json()

    return _make
