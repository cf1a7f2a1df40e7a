import copy

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.shared.config import Settings
from app.notes.store import SnapshotStore, resolve_store_paths

NOTES = [
    {
        "id": "n1",
        "title": "Groceries",
        "content": [
            {
                "id": "c1",
                "title": "Morning",
                "text": "milk, eggs",
                "createdAt": "2024-03-01T08:00:00Z",
                "updatedAt": "2024-03-01T08:05:00Z",
            },
            {
                "id": "c2",
                "title": "Evening",
                "text": "bread",
                "createdAt": "2024-03-01T18:00:00+08:00",
                "updatedAt": "2024-03-02T09:30:15.250000+08:00",
            },
        ],
        "createdAt": "2024-03-01T08:00:00Z",
        "updatedAt": "2024-03-02T09:30:15.250000+08:00",
    },
    {
        "id": "n2",
        "title": "Empty",
        "content": [],
        "createdAt": "2024-03-03T00:00:00Z",
        "updatedAt": "2024-03-03T00:00:00Z",
    },
]

@pytest.fixture
def settings(tmp_path):
    return Settings(DATA_DIR=tmp_path, WEB_DIR=tmp_path / "web")

@pytest.fixture
def store(settings):
    return SnapshotStore(resolve_store_paths(settings))

@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c

@pytest.fixture
def notes():
    return copy.deepcopy(NOTES)
