import pytest
import pytest_asyncio

from pdf_qr.backend.app.core.config import Settings
from tests.integration.api.app_factory import ADMIN_PASSWORD, build_client, make_settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest_asyncio.fixture
async def client(settings):
    client, engine = await build_client(settings)
    async with client:
        yield client
    await engine.dispose()


@pytest_asyncio.fixture
async def open_client(tmp_path):
    """Client for an app running with REQUIRE_AUTH off."""
    client, engine = await build_client(make_settings(tmp_path, REQUIRE_AUTH=False))
    async with client:
        yield client
    await engine.dispose()


@pytest_asyncio.fixture
async def auth_headers(client) -> dict[str, str]:
    resp = await client.post("/api/login", json={"username": "admin", "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['sessionId']}"}
