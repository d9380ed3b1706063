from pydantic import BaseModel, ConfigDict
from typing import List
from blog_app.schemas.types import UTCDateTime


class DailyCount(BaseModel):
    date: str  # YYYY-MM-DD, UTC day
    count: int


class RecentVisit(BaseModel):
    ip: str
    user_agent: str
    page: str
    timestamp: UTCDateTime

    model_config = ConfigDict(from_attributes=True)


class AnalyticsSummary(BaseModel):
    """
    Dashboard rollup of visits.

    daily only lists days that had visits; days without any are omitted,
    not zero-filled.
    """
    total: int
    unique: int
    today: int
    daily: List[DailyCount]
    recent: List[RecentVisit]


class CleanupResponse(BaseModel):
    message: str
    deleted: int
