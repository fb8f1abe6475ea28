"""Shared fixtures: a vault on temporary paths and an HTTP client bound to it."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from envvault.main import app
from envvault.vault import EnvVault, get_vault


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def vault(tmp_path, home):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    v = EnvVault(data_dir / "vault.db", home)
    assert v.init()
    return v


@pytest_asyncio.fixture
async def client(vault):
    app.dependency_overrides[get_vault] = lambda: vault
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
