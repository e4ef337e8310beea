import pytest
from httpx import AsyncClient

from tests.utils.auth_headers import bearer
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_create_family(client: AsyncClient, register):
    """Create Family

    Given an authenticated user
    When I create a family
    Then I am its owner and the only roster entry, with role admin
    """
    john = await register("john")

    response = await client.post(
        "/families", json={"name": "  Smith Family  "}, headers=bearer(john["token"])
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Family created successfully"

    family = body["data"]
    assert family["name"] == "Smith Family"
    assert family["owner_id"] == john["user"]["id"]
    assert family["owner"] == {
        "id": john["user"]["id"],
        "name": "John Smith",
        "email": "john@example.com",
    }
    assert len(family["members"]) == 1
    assert exclude_keys(family["members"][0], {"joined_at"}) == {
        "id": john["user"]["id"],
        "name": "John Smith",
        "email": "john@example.com",
        "role": "admin",
    }


@pytest.mark.asyncio
async def test_create_family_name_too_short(client: AsyncClient, register):
    john = await register("john")

    response = await client.post(
        "/families", json={"name": "ab"}, headers=bearer(john["token"])
    )

    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_FAILED"
    assert body["errors"]["name"] == ["The name must be at least 3 characters."]


@pytest.mark.asyncio
async def test_create_family_requires_auth(client: AsyncClient):
    response = await client.post("/families", json={"name": "Smith Family"})

    assert response.status_code == 401
