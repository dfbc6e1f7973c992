"""Activities API routes."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from healthtrack.database import get_db
from healthtrack.api.auth import get_current_user_id
from healthtrack.schemas.activity import (
    ActivityCreate,
    ActivityResponse,
    ActivityEnvelope,
    ActivityListResponse,
    MessageResponse,
    StatisticsResponse,
)
from healthtrack.services import activity_service

router = APIRouter()


@router.post("", response_model=ActivityEnvelope, status_code=status.HTTP_201_CREATED)
async def create_activity(
    data: ActivityCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Record an exercise or meal."""
    activity = await activity_service.create_activity(db, user_id, data)
    return ActivityEnvelope(activity=ActivityResponse.model_validate(activity))


@router.get("", response_model=ActivityListResponse)
async def list_activities(
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """List the current user's activities, newest first."""
    activities = await activity_service.list_activities(db, user_id)
    return ActivityListResponse(
        activities=[ActivityResponse.model_validate(a) for a in activities]
    )


@router.get("/stats/summary", response_model=StatisticsResponse)
async def get_statistics(
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Activity count and calorie total for the current user."""
    statistics = await activity_service.get_statistics(db, user_id)
    return StatisticsResponse(statistics=statistics)


@router.delete("/{activity_id}", response_model=MessageResponse)
async def delete_activity(
    activity_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Delete one of the current user's activities."""
    await activity_service.delete_activity(db, user_id, activity_id)
    return MessageResponse(message="Activity deleted")
