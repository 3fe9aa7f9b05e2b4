import logging
from typing import List, Optional

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from app.core.exceptions import UpdateFailed
from app.database.mongo_client import serialize_document, to_object_id
from app.modules.relief_goods.models import UPSERT_FIELDS
from app.modules.relief_goods.schemas import DeleteAck, InsertAck, ReliefGoodRecord, UpdateAck

logger = logging.getLogger(__name__)


class ReliefGoodsService:
    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def list_relief_goods(self) -> List[ReliefGoodRecord]:
        """Snapshot of every record, in store order"""
        cursor = self.collection.find({})
        documents = await cursor.to_list(length=None)
        return [serialize_document(doc) for doc in documents]

    async def create_relief_good(self, record: ReliefGoodRecord) -> InsertAck:
        """Insert the record as-is; the store assigns the id"""
        # insert_one adds _id to the dict it is given
        document = dict(record)
        result = await self.collection.insert_one(document)
        logger.info("Created relief good %s", result.inserted_id)
        return InsertAck(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))

    async def get_relief_good_by_id(self, relief_good_id: str) -> Optional[ReliefGoodRecord]:
        """Matching record, or None when the id is well-formed but unknown"""
        object_id = to_object_id(relief_good_id)
        document = await self.collection.find_one({"_id": object_id})
        return serialize_document(document)

    async def delete_relief_good(self, relief_good_id: str) -> DeleteAck:
        """Delete at most one record; an unknown id reports deletedCount 0"""
        object_id = to_object_id(relief_good_id)
        result = await self.collection.delete_one({"_id": object_id})
        logger.info("Deleted relief good %s (%d removed)", relief_good_id, result.deleted_count)
        return DeleteAck(acknowledged=result.acknowledged, deletedCount=result.deleted_count)

    async def upsert_relief_good(self, relief_good_id: str, record: ReliefGoodRecord) -> UpdateAck:
        """Replace the fixed field set of the record, creating it under this id when missing"""
        object_id = to_object_id(relief_good_id)
        update_doc = {"$set": {field: record.get(field) for field in UPSERT_FIELDS}}
        try:
            result = await self.collection.update_one({"_id": object_id}, update_doc, upsert=True)
        except PyMongoError as e:
            logger.error("Error updating relief goods %s: %s", relief_good_id, e)
            raise UpdateFailed()

        upserted_id = result.upserted_id
        logger.info(
            "Updated relief good %s (matched=%d, upserted=%s)",
            relief_good_id, result.matched_count, upserted_id is not None
        )
        return UpdateAck(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=0 if upserted_id is None else 1,
            upsertedId=None if upserted_id is None else str(upserted_id),
        )
