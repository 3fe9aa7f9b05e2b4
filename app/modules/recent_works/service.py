from pymongo.asynchronous.collection import AsyncCollection
from typing import List

from app.database.mongo_client import serialize_document
from app.modules.recent_works.schemas import RecentWorkRecord


class RecentWorksService:
    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def list_recent_works(self) -> List[RecentWorkRecord]:
        """List every recent work record"""
        documents = await self.collection.find({}).to_list(length=None)
        return [serialize_document(doc) for doc in documents]
