import pytest
from httpx import AsyncClient

from tests.utils.auth_headers import bearer


@pytest.mark.asyncio
async def test_refresh_rotates_token(client: AsyncClient, register):
    registered = await register("john")
    old_token = registered["token"]

    response = await client.post("/refresh-token", headers=bearer(old_token))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    new_token = body["data"]["token"]
    assert new_token != old_token

    stale = await client.post("/refresh-token", headers=bearer(old_token))
    assert stale.status_code == 401

    fresh = await client.get("/families", headers=bearer(new_token))
    assert fresh.status_code == 200


@pytest.mark.asyncio
async def test_refresh_requires_token(client: AsyncClient):
    response = await client.post("/refresh-token")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_refresh_keeps_other_sessions(client: AsyncClient, register, issue_extra_token):
    registered = await register("john")
    other_token = await issue_extra_token(registered["user"]["id"])

    response = await client.post("/refresh-token", headers=bearer(registered["token"]))
    assert response.status_code == 200
    new_token = response.json()["data"]["token"]

    for token in (other_token, new_token):
        listed = await client.get("/families", headers=bearer(token))
        assert listed.status_code == 200
