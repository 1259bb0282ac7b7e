from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class LinkCreate(BaseModel):
    """Schema for creating a new short link"""
    url: Optional[str] = Field(None, description="Target URL to shorten")
    code: Optional[str] = Field(None, description="Custom code, 6-8 alphanumeric characters")


class LinkResponse(BaseModel):
    """Schema for link response"""
    code: str
    target_url: str
    total_clicks: int
    last_clicked: Optional[datetime] = None

    class Config:
        from_attributes = True


class LinkStats(LinkResponse):
    """Schema for link statistics"""
    created_at: datetime


class ErrorResponse(BaseModel):
    error: str
