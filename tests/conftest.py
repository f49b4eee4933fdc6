"""Shared fixtures: an in-memory SQLite store injected into the FastAPI app."""

import os

# Settings are read on app startup; keep tests off any real database
os.environ.setdefault("PORT", "8080")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.api.persons import get_store
from app.db.schema import metadata
from app.db.store import PersonStore
from app.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return PersonStore(engine)


@pytest.fixture
def broken_store():
    """A store whose database has no `people` table, so every query fails."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield PersonStore(engine)
    engine.dispose()


@pytest.fixture
def make_client():
    clients = []

    def _make(store):
        app.dependency_overrides[get_store] = lambda: store
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, store):
    return make_client(store)


@pytest.fixture
def payload():
    return {
        "apelido": "josé",
        "nome": "José Roberto",
        "nascimento": "2000-10-01",
        "stack": ["C#", "Node", "Oracle"],
    }
