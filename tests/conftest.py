"""
Shared fixtures: an in-memory stand-in for the MongoDB database and an app wired to it.
"""

import copy
import os

# Settings are read at import time; keep bcrypt cheap and the secret fixed for tests
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("EXPIRES_IN", "1h")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError
from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult, UpdateResult

from app.database.mongo_client import get_database
from app.main import create_app


def _matches(document: dict, query: dict) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self._documents)
        return self._documents[:length]


class FakeCollection:
    """Equality-filter subset of the async pymongo collection API."""

    def __init__(self, name: str):
        self.name = name
        self.documents = []
        self.unique_fields = set()

    def find(self, query=None):
        query = query or {}
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query)])

    async def find_one(self, query):
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    def _check_unique(self, document: dict):
        for field in self.unique_fields:
            if any(d.get(field) == document.get(field) for d in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name}", 11000)

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self._check_unique(document)
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def insert_many(self, documents):
        ids = [(await self.insert_one(d)).inserted_id for d in documents]
        return InsertManyResult(ids, True)

    async def delete_one(self, query):
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)

    async def update_one(self, query, update, upsert=False):
        fields = update.get("$set", {})
        for document in self.documents:
            if _matches(document, query):
                modified = any(document.get(k) != v for k, v in fields.items())
                document.update(copy.deepcopy(fields))
                return UpdateResult({"n": 1, "nModified": int(modified)}, True)
        if not upsert:
            return UpdateResult({"n": 0, "nModified": 0}, True)
        document = {**query, **copy.deepcopy(fields)}
        document.setdefault("_id", ObjectId())
        self.documents.append(document)
        return UpdateResult({"n": 1, "nModified": 0, "upserted": document["_id"]}, True)

    async def create_index(self, keys, unique=False, name=None):
        if unique:
            self.unique_fields.update(field for field, _ in keys)
        return name


class FakeDatabase:
    def __init__(self):
        self.collections = {}
        self.pings = 0

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def command(self, name):
        self.pings += 1
        return {"ok": 1.0}


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def app(fake_db):
    application = create_app()
    application.dependency_overrides[get_database] = lambda: fake_db
    return application


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
