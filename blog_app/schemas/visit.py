from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from blog_app.schemas.types import UTCDateTime


class VisitCreate(BaseModel):
    """
    Visit event sent by the public site.

    The client reports its own IP; user agent and page are optional.
    """
    ip: Optional[str] = Field(None, description="Client IP address")
    user_agent: Optional[str] = Field(None, alias="userAgent", description="User agent string")
    page: Optional[str] = Field(None, description="Path of the viewed page")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "ip": "192.168.1.1",
                "userAgent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/120.0",
                "page": "/",
            }
        },
    )


class VisitResponse(BaseModel):
    id: int
    ip: str
    user_agent: str
    page: str
    timestamp: UTCDateTime

    model_config = ConfigDict(from_attributes=True)
