from pydantic import BaseModel, JsonValue
from typing import Dict, List, Optional

# Open bag of caller-defined fields
ReliefGoodRecord = Dict[str, JsonValue]


class ReliefGoodsListResponse(BaseModel):
    status: bool = True
    data: List[ReliefGoodRecord]


class InsertAck(BaseModel):
    acknowledged: bool
    insertedId: str


class DeleteAck(BaseModel):
    acknowledged: bool
    deletedCount: int


class UpdateAck(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: Optional[str] = None
