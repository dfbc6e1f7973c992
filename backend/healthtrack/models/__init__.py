"""SQLAlchemy models."""
from healthtrack.models.user import User
from healthtrack.models.activity import Activity, ActivityType

__all__ = ["User", "Activity", "ActivityType"]
