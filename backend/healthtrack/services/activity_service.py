"""Activity service. Every query is scoped to the owning user."""
import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc, func
from healthtrack.errors import NotFound, ValidationError
from healthtrack.models.activity import Activity, ActivityType
from healthtrack.schemas.activity import ActivityCreate, Statistics

logger = logging.getLogger(__name__)


async def create_activity(
    db: AsyncSession,
    user_id: int,
    data: ActivityCreate,
) -> Activity:
    """Record a new activity for the user."""
    # calories of 0 counts as missing
    if not data.type or not data.name or not data.calories or not data.date:
        raise ValidationError("Missing fields")
    if data.type not in {t.value for t in ActivityType}:
        raise ValidationError("Invalid type")

    activity = Activity(
        user_id=user_id,
        type=data.type,
        name=data.name,
        duration=data.duration,
        calories=data.calories,
        date=data.date,
    )
    db.add(activity)
    await db.commit()
    await db.refresh(activity)
    logger.info("User %s recorded %s activity %s", user_id, activity.type, activity.id)
    return activity


async def list_activities(db: AsyncSession, user_id: int) -> List[Activity]:
    """List the user's activities, most recent date first."""
    result = await db.execute(
        select(Activity)
        .where(Activity.user_id == user_id)
        .order_by(desc(Activity.date), desc(Activity.id))
    )
    return list(result.scalars().all())


async def delete_activity(db: AsyncSession, user_id: int, activity_id: int) -> None:
    """
    Delete one of the user's activities.

    A missing activity and someone else's activity both raise NotFound.
    """
    result = await db.execute(
        select(Activity).where(
            Activity.id == activity_id,
            Activity.user_id == user_id,
        )
    )
    activity = result.scalar_one_or_none()
    if activity is None:
        raise NotFound("Activity not found")

    await db.delete(activity)
    await db.commit()
    logger.info("User %s deleted activity %s", user_id, activity_id)


async def get_statistics(db: AsyncSession, user_id: int) -> Statistics:
    """Count activities and sum calories for the user."""
    result = await db.execute(
        select(
            func.count(Activity.id),
            func.coalesce(func.sum(Activity.calories), 0),
        ).where(Activity.user_id == user_id)
    )
    total_activities, total_calories = result.one()
    return Statistics(
        total_activities=total_activities or 0,
        total_calories=int(total_calories or 0),
    )
