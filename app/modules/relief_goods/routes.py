from fastapi import APIRouter, Depends
from pymongo.asynchronous.collection import AsyncCollection
from typing import Optional

from app.core.dependencies import get_relief_goods_collection
from app.modules.relief_goods.schemas import (
    ReliefGoodRecord, ReliefGoodsListResponse, InsertAck, DeleteAck, UpdateAck
)
from app.modules.relief_goods.service import ReliefGoodsService

router = APIRouter(prefix="/relief-goods", tags=["relief-goods"])


def get_relief_goods_service(
    collection: AsyncCollection = Depends(get_relief_goods_collection)
) -> ReliefGoodsService:
    return ReliefGoodsService(collection)


@router.get("", response_model=ReliefGoodsListResponse)
async def list_relief_goods(service: ReliefGoodsService = Depends(get_relief_goods_service)):
    """List every relief goods record"""
    return ReliefGoodsListResponse(data=await service.list_relief_goods())


@router.post("", response_model=InsertAck)
async def create_relief_good(
    record: ReliefGoodRecord,
    service: ReliefGoodsService = Depends(get_relief_goods_service)
):
    """Create a relief goods record from an arbitrary JSON object"""
    return await service.create_relief_good(record)


@router.get("/{relief_good_id}", response_model=Optional[ReliefGoodRecord])
async def get_relief_good(
    relief_good_id: str,
    service: ReliefGoodsService = Depends(get_relief_goods_service)
):
    """Get one record by id; null when it does not exist"""
    return await service.get_relief_good_by_id(relief_good_id)


@router.delete("/{relief_good_id}", response_model=DeleteAck)
async def delete_relief_good(
    relief_good_id: str,
    service: ReliefGoodsService = Depends(get_relief_goods_service)
):
    """Delete one record by id"""
    return await service.delete_relief_good(relief_good_id)


@router.put("/{relief_good_id}", response_model=UpdateAck)
async def update_relief_good(
    relief_good_id: str,
    record: ReliefGoodRecord,
    service: ReliefGoodsService = Depends(get_relief_goods_service)
):
    """Replace title, category, item, reason, amount, description and priority (upsert)"""
    return await service.upsert_relief_good(relief_good_id, record)
