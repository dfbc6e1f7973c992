"""Activity model."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from healthtrack.database import Base
import enum


class ActivityType(str, enum.Enum):
    """Kinds of tracked activity."""
    EXERCISE = "exercise"
    MEAL = "meal"


class Activity(Base):
    """An exercise or meal recorded by a user."""

    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(Enum('exercise', 'meal', name='activitytype'), nullable=False)
    name = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=False, default=0)  # minutes
    calories = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", backref="activities")

    def __repr__(self):
        return f"<Activity(id={self.id}, user_id={self.user_id}, type={self.type})>"
