"""Activity schemas."""
import datetime as dt
from typing import Optional, List, Literal
from pydantic import BaseModel, Field


# Literal type to match database enum values
ActivityTypeType = Literal["exercise", "meal"]

# Upper bound of the 32-bit INTEGER columns
MAX_INT_COLUMN = 2**31 - 1


class ActivityCreate(BaseModel):
    """Schema for recording an activity. Required fields are checked by the service."""
    type: Optional[str] = None
    name: Optional[str] = None
    duration: int = Field(default=0, ge=0, le=MAX_INT_COLUMN)  # minutes
    calories: Optional[int] = Field(default=None, le=MAX_INT_COLUMN)
    date: Optional[dt.date] = None


class ActivityResponse(BaseModel):
    """Activity response schema."""
    id: int
    user_id: int
    type: ActivityTypeType
    name: str
    duration: int
    calories: int
    date: dt.date
    created_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class ActivityEnvelope(BaseModel):
    activity: ActivityResponse


class ActivityListResponse(BaseModel):
    activities: List[ActivityResponse]


class Statistics(BaseModel):
    """Aggregate numbers over a user's activities."""
    total_activities: int
    total_calories: int


class StatisticsResponse(BaseModel):
    statistics: Statistics


class MessageResponse(BaseModel):
    message: str
