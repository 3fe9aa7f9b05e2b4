from pydantic import BaseModel, JsonValue
from typing import Dict, List

RecentWorkRecord = Dict[str, JsonValue]


class RecentWorksListResponse(BaseModel):
    status: bool = True
    data: List[RecentWorkRecord]
