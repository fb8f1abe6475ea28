"""Secret and shell sync API tests."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_secrets_empty(client: AsyncClient):
    resp = await client.get("/api/secrets/")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_add_and_list_secret(client: AsyncClient):
    resp = await client.post("/api/secrets/", json={"key": "API_KEY", "value": "abcdef1234567890"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    resp = await client.get("/api/secrets/")
    data = resp.json()
    assert len(data) == 1
    assert data[0]["key"] == "API_KEY"
    assert data[0]["value_masked"] == "abcd...7890"
    assert "value" not in data[0]


@pytest.mark.asyncio
async def test_add_rejects_empty_key(client: AsyncClient):
    resp = await client.post("/api/secrets/", json={"key": "", "value": "x"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_search_secrets(client: AsyncClient):
    await client.post("/api/secrets/", json={"key": "MY_KEY_1", "value": "v"})
    await client.post("/api/secrets/", json={"key": "OTHER", "value": "v"})
    resp = await client.get("/api/secrets/", params={"q": "key"})
    assert [s["key"] for s in resp.json()] == ["MY_KEY_1"]


@pytest.mark.asyncio
async def test_get_update_delete(client: AsyncClient):
    await client.post("/api/secrets/", json={"key": "TOKEN", "value": "first"})
    secret_id = (await client.get("/api/secrets/")).json()[0]["id"]

    resp = await client.get(f"/api/secrets/{secret_id}/value")
    assert resp.status_code == 200
    assert resp.json() == {"id": secret_id, "value": "first"}

    resp = await client.patch(f"/api/secrets/{secret_id}", json={"value": "second"})
    assert resp.json() == {"success": True}
    resp = await client.get(f"/api/secrets/{secret_id}/value")
    assert resp.json()["value"] == "second"

    resp = await client.delete(f"/api/secrets/{secret_id}")
    assert resp.json() == {"success": True}
    resp = await client.get(f"/api/secrets/{secret_id}/value")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_missing_secret(client: AsyncClient):
    resp = await client.patch("/api/secrets/12345", json={"value": "x"})
    assert resp.status_code == 200
    assert resp.json() == {"success": False}


@pytest.mark.asyncio
async def test_import_export(client: AsyncClient):
    resp = await client.post(
        "/api/secrets/import", json={"content": 'FOO=bar\n# comment\nBAZ="qux"\n'}
    )
    assert resp.json() == {"imported": 2}

    resp = await client.get("/api/secrets/export")
    assert resp.json() == {"content": 'BAZ="qux"\nFOO="bar"'}


@pytest.mark.asyncio
async def test_shell_sync(client: AsyncClient, home):
    (home / ".bashrc").write_text("")
    await client.post("/api/secrets/", json={"key": "A", "value": "1"})

    resp = await client.post("/api/shell/sync")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "path": str(home / ".envvault")}
    assert (home / ".envvault").read_text() == 'export A="1"'
    assert "source ~/.envvault" in (home / ".bashrc").read_text()


@pytest.mark.asyncio
async def test_shell_path(client: AsyncClient, home):
    resp = await client.get("/api/shell/path")
    assert resp.json() == {"path": str(home / ".envvault")}


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_get_value_out_of_range_id(client: AsyncClient):
    resp = await client.get("/api/secrets/99999999999999999999999/value")
    assert resp.status_code == 404
