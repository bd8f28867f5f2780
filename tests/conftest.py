import asyncio
import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="devmatch-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_DB_DIR}/test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

from fastapi.testclient import TestClient  # noqa: E402

from core.database import AsyncSessionLocal, engine  # noqa: E402
from main import app  # noqa: E402
from models.base import Base  # noqa: E402

PASSWORD = "secret123"


async def _reset_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


def _run_db(fn):
    """Run ``await fn(session)`` on a fresh schema inside its own event loop."""
    async def _main():
        await _reset_schema()
        try:
            async with AsyncSessionLocal() as session:
                return await fn(session)
        finally:
            await engine.dispose()
    return asyncio.run(_main())


@pytest.fixture()
def run_db():
    return _run_db


@pytest.fixture()
def client():
    async def _prepare():
        await _reset_schema()
        await engine.dispose()

    asyncio.run(_prepare())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def signup(client):
    """Register a user and return ``(user_id, auth headers)``."""
    counter = {"n": 0}

    def _signup(first_name=None, email=None):
        counter["n"] += 1
        first_name = first_name or f"User{counter['n']}"
        email = email or f"{first_name.lower()}.{counter['n']}@example.com"
        res = client.post(
            "/signup",
            json={"email": email, "password": PASSWORD, "first_name": first_name},
        )
        assert res.status_code == 201, res.text
        body = res.json()
        return body["user"]["user_id"], {"Authorization": f"Bearer {body['access_token']}"}

    return _signup
