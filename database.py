"""
Document store access.

Collections are addressed by name and documents by their ObjectId string.
When DATABASE_URL / DATABASE_NAME are not set, `db` is None and every
operation raises StoreUnavailableError.
"""
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import settings
from exceptions import InvalidDocumentIdError, StoreUnavailableError
from logging_config import logger


def _connect() -> Optional[Database]:
    if not settings.DATABASE_URL or not settings.DATABASE_NAME:
        logger.warning("DATABASE_URL or DATABASE_NAME not set, document store disabled")
        return None
    client = MongoClient(settings.DATABASE_URL, serverSelectionTimeoutMS=settings.DATABASE_TIMEOUT_MS)
    return client[settings.DATABASE_NAME]


db: Optional[Database] = _connect()


def to_object_id(document_id: str) -> ObjectId:
    try:
        return ObjectId(document_id)
    except (InvalidId, TypeError):
        raise InvalidDocumentIdError(str(document_id))


class DocumentStore:
    """Collection-scoped list/add/update/delete over a pymongo database"""

    def __init__(self, database: Optional[Database]):
        self.database = database

    def _collection(self, name: str):
        if self.database is None:
            raise StoreUnavailableError(operation=name)
        return self.database[name]

    def list_documents(self, collection: str) -> List[Dict[str, Any]]:
        try:
            return list(self._collection(collection).find())
        except PyMongoError as e:
            raise StoreUnavailableError(str(e)[:100], operation=f"list {collection}") from e

    def add_document(self, collection: str, data: Dict[str, Any]) -> str:
        try:
            inserted = self._collection(collection).insert_one(dict(data))
        except PyMongoError as e:
            raise StoreUnavailableError(str(e)[:100], operation=f"add {collection}") from e
        return str(inserted.inserted_id)

    def update_document(self, collection: str, document_id: str, data: Dict[str, Any]) -> bool:
        """Replace every field of the document; False when it does not exist."""
        oid = to_object_id(document_id)
        try:
            result = self._collection(collection).replace_one({"_id": oid}, dict(data))
        except PyMongoError as e:
            raise StoreUnavailableError(str(e)[:100], operation=f"update {collection}") from e
        return result.matched_count > 0

    def delete_document(self, collection: str, document_id: str) -> bool:
        oid = to_object_id(document_id)
        try:
            result = self._collection(collection).delete_one({"_id": oid})
        except PyMongoError as e:
            raise StoreUnavailableError(str(e)[:100], operation=f"delete {collection}") from e
        return result.deleted_count > 0

    def collection_names(self) -> List[str]:
        if self.database is None:
            raise StoreUnavailableError(operation="list collections")
        try:
            return self.database.list_collection_names()
        except PyMongoError as e:
            raise StoreUnavailableError(str(e)[:100], operation="list collections") from e


def get_store() -> DocumentStore:
    return DocumentStore(db)
