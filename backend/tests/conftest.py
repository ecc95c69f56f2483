import asyncio
import os
import tempfile

# Configure before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["BASE_URL"] = "http://testserver"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="storefront-uploads-")

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from storefront.core.database import Base, get_db
from storefront.main import app
from storefront.models import Product, User  # noqa: F401


@pytest.fixture
def client():
    # Entering runs the lifespan; a fresh in-memory database per test
    with TestClient(app) as c:
        yield c


@pytest.fixture
def signup(client):
    def _signup(email="alice@x.com", password="pw1", username="alice"):
        r = client.post(
            "/signup",
            json={"username": username, "email": email, "password": password},
        )
        assert r.status_code == 200
        return r.json()["token"]

    return _signup


@pytest.fixture
def add_product(client):
    def _add(name="Shirt", category="men", new_price=50.0, old_price=80.5):
        r = client.post(
            "/addproduct",
            json={
                "name": name,
                "image": "http://testserver/images/x.png",
                "category": category,
                "new_price": new_price,
                "old_price": old_price,
            },
        )
        assert r.status_code == 200
        return r.json()

    return _add


@pytest.fixture
def run_concurrently(tmp_path):
    """
    Run an async scenario against the app with a file-backed database.

    Unlike the in-memory database, each session gets its own connection,
    so requests gathered in the scenario really interleave.
    """

    def _run(scenario):
        async def main():
            engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'app.db'}")
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            factory = async_sessionmaker(engine, expire_on_commit=False)

            async def override_get_db():
                async with factory() as session:
                    yield session

            app.dependency_overrides[get_db] = override_get_db
            try:
                transport = httpx.ASGITransport(app=app)
                async with httpx.AsyncClient(
                    transport=transport, base_url="http://test"
                ) as ac:
                    return await scenario(ac)
            finally:
                app.dependency_overrides.clear()
                await engine.dispose()

        return asyncio.run(main())

    return _run
