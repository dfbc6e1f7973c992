"""Database initialization script."""
import asyncio
import argparse

from healthtrack.config import get_settings
from healthtrack.database import engine, init_db, AsyncSessionLocal
from healthtrack.services import user_store
from healthtrack.services.auth_service import PasswordHasher


async def init_database(demo_email: str = None, demo_password: str = None):
    """Create all tables and optionally seed a demo user."""
    print("Creating database tables...")
    await init_db()
    print("Tables created successfully!")

    if demo_email:
        settings = get_settings()
        async with AsyncSessionLocal() as db:
            if await user_store.find_user_by_email(db, demo_email):
                print(f"User {demo_email} already exists.")
            else:
                hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
                user = await user_store.insert_user(db, "Demo", demo_email, hasher.hash(demo_password))
                print(f"Demo user created: {user.email} (id={user.id})")

    await engine.dispose()
    print("Database initialization complete!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create HealthTrack tables")
    parser.add_argument("--demo-email", help="seed a demo user with this email")
    parser.add_argument("--demo-password", default="demo123")
    args = parser.parse_args()
    asyncio.run(init_database(args.demo_email, args.demo_password))
