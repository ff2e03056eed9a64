"""
Test configuration and fixtures
"""
import os
from collections import defaultdict
from typing import Any, Dict, List

import pytest
from bson import ObjectId
from faker import Faker
from fastapi.testclient import TestClient

# No real document store during tests
os.environ.pop('DATABASE_URL', None)
os.environ.pop('DATABASE_NAME', None)
os.environ['ENVIRONMENT'] = 'testing'
os.environ['LOG_LEVEL'] = 'WARNING'

from main import app
from database import get_store, to_object_id
from exceptions import StoreUnavailableError

fake = Faker()


class InMemoryStore:
    """Stands in for DocumentStore; set `fail` to simulate an unreachable store"""

    def __init__(self):
        self.collections: Dict[str, Dict[ObjectId, Dict[str, Any]]] = defaultdict(dict)
        self.database = "memory"
        self.fail = False

    def _check(self, operation: str):
        if self.fail:
            raise StoreUnavailableError("connection refused", operation=operation)

    def insert(self, collection: str, data: Dict[str, Any]) -> str:
        oid = ObjectId()
        self.collections[collection][oid] = dict(data)
        return str(oid)

    def get(self, collection: str, document_id: str) -> Dict[str, Any]:
        return self.collections[collection].get(ObjectId(document_id))

    def list_documents(self, collection: str) -> List[Dict[str, Any]]:
        self._check(f"list {collection}")
        return [{**doc, "_id": oid} for oid, doc in self.collections[collection].items()]

    def add_document(self, collection: str, data: Dict[str, Any]) -> str:
        self._check(f"add {collection}")
        return self.insert(collection, data)

    def update_document(self, collection: str, document_id: str, data: Dict[str, Any]) -> bool:
        oid = to_object_id(document_id)
        self._check(f"update {collection}")
        if oid not in self.collections[collection]:
            return False
        self.collections[collection][oid] = dict(data)
        return True

    def delete_document(self, collection: str, document_id: str) -> bool:
        oid = to_object_id(document_id)
        self._check(f"delete {collection}")
        return self.collections[collection].pop(oid, None) is not None

    def collection_names(self) -> List[str]:
        self._check("list collections")
        return [name for name, docs in self.collections.items() if docs]


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(store: InMemoryStore):
    """Test client with the in-memory store injected"""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def project_data() -> Dict[str, Any]:
    return {
        "title": fake.catch_phrase(),
        "description": fake.sentence(),
        "category": "Video",
        "platform": "youtube",
        "videoUrl": "https://youtube.com/shorts/dQw4w9WgXcQ",
    }


@pytest.fixture
def pricing_plan_data() -> Dict[str, Any]:
    return {
        "title": "Wedding Package",
        "price": 1499,
        "currency": "$",
        "period": "per project",
        "features": "Full Day Coverage\n  Two Photographers \n\nOnline Gallery",
        "isPopular": True,
        "backgroundColor": "#ebc08f",
    }


@pytest.fixture
def contact_data() -> Dict[str, Any]:
    return {
        "contactType": "email",
        "label": "General Inquiries",
        "content": fake.email(),
        "isMain": True,
    }
