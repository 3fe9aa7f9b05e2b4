from fastapi import APIRouter, Depends
from pymongo.asynchronous.collection import AsyncCollection

from app.core.dependencies import get_recent_works_collection
from app.modules.recent_works.schemas import RecentWorksListResponse
from app.modules.recent_works.service import RecentWorksService

router = APIRouter(prefix="/our-recent-works", tags=["recent-works"])


def get_recent_works_service(
    collection: AsyncCollection = Depends(get_recent_works_collection)
) -> RecentWorksService:
    return RecentWorksService(collection)


@router.get("", response_model=RecentWorksListResponse)
async def list_recent_works(service: RecentWorksService = Depends(get_recent_works_service)):
    return RecentWorksListResponse(data=await service.list_recent_works())
