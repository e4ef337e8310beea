from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.utils.auth_headers import bearer
from tests.utils.family_flows import create_family, join, list_families


@pytest.mark.asyncio
async def test_owner_removes_member(client: AsyncClient, register):
    john = await register("john")
    jane = await register("jane")
    family = await create_family(client, john["token"])
    await join(client, john["token"], jane["token"], family["id"])

    response = await client.delete(
        f"/families/{family['id']}/members/{jane['user']['id']}",
        headers=bearer(john["token"]),
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"removed": 1}
    assert await list_families(client, jane["token"]) == []


@pytest.mark.asyncio
async def test_cannot_remove_owner(client: AsyncClient, register):
    john = await register("john")
    family = await create_family(client, john["token"])

    response = await client.delete(
        f"/families/{family['id']}/members/{john['user']['id']}",
        headers=bearer(john["token"]),
    )

    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "CANNOT_REMOVE_OWNER"
    assert body["errors"] == {"user": ["Cannot remove the owner from the family."]}


@pytest.mark.asyncio
async def test_remove_non_member(client: AsyncClient, register):
    john = await register("john")
    alice = await register("alice")
    family = await create_family(client, john["token"])

    response = await client.delete(
        f"/families/{family['id']}/members/{alice['user']['id']}",
        headers=bearer(john["token"]),
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "NOT_A_MEMBER"


@pytest.mark.asyncio
async def test_member_cannot_remove(client: AsyncClient, register):
    john = await register("john")
    jane = await register("jane")
    family = await create_family(client, john["token"])
    await join(client, john["token"], jane["token"], family["id"])

    response = await client.delete(
        f"/families/{family['id']}/members/{jane['user']['id']}",
        headers=bearer(jane["token"]),
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_remove_unknown_user(client: AsyncClient, register):
    john = await register("john")
    family = await create_family(client, john["token"])

    response = await client.delete(
        f"/families/{family['id']}/members/{uuid4()}", headers=bearer(john["token"])
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"
