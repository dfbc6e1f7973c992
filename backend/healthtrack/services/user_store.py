"""Credential store: persistence of user accounts."""
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from healthtrack.models.user import User


async def find_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Get a user by email (exact, case-sensitive match)."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
    """Get a user by ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def insert_user(
    db: AsyncSession,
    name: str,
    email: str,
    password_hash: str,
) -> User:
    """
    Insert a new user and return it with its assigned id.

    Raises sqlalchemy.exc.IntegrityError when the email is already taken;
    the session is rolled back before the error propagates.
    """
    user = User(
        name=name,
        email=email,
        password_hash=password_hash,
    )
    db.add(user)
    try:
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        raise
    await db.refresh(user)
    return user
