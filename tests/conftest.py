import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.config import Settings
from app.db import TitleStore
from app.ingest import seed_database
from app.main import create_app

EXAMPLE_TITLES = [
    {"show_id": 1, "title": "A", "type": "Movie", "country": "US"},
    {"show_id": 2, "title": "B", "type": "TV Show", "country": "US"},
]


class MockTitleStore(TitleStore):
    """TitleStore over a mongomock collection."""

    def __init__(self):
        super().__init__(mongomock.MongoClient().db.netflixes)

    def ping(self):
        return {"ok": 1.0}


class UnavailableTitleStore(TitleStore):
    """TitleStore whose every operation fails like an unreachable server."""

    def __init__(self):
        super().__init__(collection=None)

    def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    ping = find_movies = group_by_country = find_movie = delete_all = insert = _fail


def strip_ids(documents):
    return [{k: v for k, v in doc.items() if k != "_id"} for doc in documents]


@pytest.fixture
def store():
    return MockTitleStore()


@pytest.fixture
def seeded_store(store):
    seed_database(store, EXAMPLE_TITLES)
    return store


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(seeded_store, settings):
    return TestClient(create_app(store=seeded_store, settings=settings))


@pytest.fixture
def unavailable_client(settings):
    return TestClient(create_app(store=UnavailableTitleStore(), settings=settings))
