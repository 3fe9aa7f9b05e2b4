import base64
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from app.config.settings import settings
from app.core.exceptions import InvalidIdentifier

logger = logging.getLogger(__name__)


class MongoClient:
    _client: AsyncMongoClient = None

    @classmethod
    def get_client(cls) -> AsyncMongoClient:
        if cls._client is None:
            cls._client = AsyncMongoClient(
                settings.mongodb_uri,
                serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
            )
        return cls._client

    @classmethod
    def get_database(cls) -> AsyncDatabase:
        return cls.get_client()[settings.mongodb_db_name]

    @classmethod
    async def close_client(cls):
        if cls._client is not None:
            await cls._client.close()
        cls._client = None


def get_database() -> AsyncDatabase:
    return MongoClient.get_database()


async def ping(database) -> None:
    """Round-trip to the server; raises ConnectionFailure when it is unreachable."""
    await database.command("ping")


async def ensure_indexes(database) -> None:
    """Unique email index: a concurrent duplicate registration fails at insert time."""
    await database[settings.users_collection].create_index(
        [("email", ASCENDING)], unique=True, name="email_unique"
    )
    logger.info("Ensured unique index on %s.email", settings.users_collection)


def to_object_id(value: str) -> ObjectId:
    """Parse a path id into an ObjectId, raising InvalidIdentifier when malformed."""
    # ObjectId(None) would mint a fresh id; is_valid rejects it
    if not ObjectId.is_valid(value):
        raise InvalidIdentifier(f"Invalid id: {value}")
    return ObjectId(value)


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Make a document JSON-safe: ObjectId (including _id) and other BSON types become strings, datetimes ISO text."""
    if document is None:
        return None
    return {key: _serialize_value(value) for key, value in document.items()}


def _serialize_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return serialize_document(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if isinstance(value, bytes):
        # bson Binary is a bytes subclass
        return base64.b64encode(value).decode()
    # ObjectId, Decimal128, UUID, Timestamp and other BSON types
    return str(value)
