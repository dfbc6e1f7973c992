"""Pytest fixtures — temporary SQLite database per test."""
import asyncio
import os
import tempfile

# Must be set before healthtrack.config caches its settings
_TMP_DIR = tempfile.mkdtemp(prefix="healthtrack-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR}/app.db"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from healthtrack.config import get_settings
from healthtrack.database import get_db, init_db
from healthtrack.main import app
from healthtrack.services.auth_service import TokenIssuer, TokenVerifier


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create a fresh SQLite engine with all tables for each test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/test.db", poolclass=NullPool)
    asyncio.run(init_db(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency pointed at the test engine."""
    TestingSession = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def _override_get_db():
        async with TestingSession() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def issuer():
    return TokenIssuer(get_settings().jwt_secret_key)


@pytest.fixture
def verifier():
    return TokenVerifier(get_settings().jwt_secret_key)


@pytest.fixture
def signup(client):
    """Helper — POST /api/auth/signup and return response JSON."""
    def _signup(name="Alice", email="alice@x.com", password="secret1"):
        resp = client.post("/api/auth/signup", json={
            "name": name,
            "email": email,
            "password": password,
        })
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _signup


@pytest.fixture
def auth_headers(signup):
    """Authorization headers for a freshly signed-up user."""
    return {"Authorization": f"Bearer {signup()['token']}"}
