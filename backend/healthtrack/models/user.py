"""User model."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from healthtrack.database import Base


class User(Base):
    """User account holding login credentials."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
