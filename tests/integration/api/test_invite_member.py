import re
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.domain.base import utcnow
from tests.utils.auth_headers import bearer
from tests.utils.family_flows import create_family, join


@pytest.mark.asyncio
async def test_owner_invites(client: AsyncClient, register):
    john = await register("john")
    family = await create_family(client, john["token"])

    response = await client.post(
        "/families/invite",
        json={"family_id": family["id"], "email": "jane@example.com"},
        headers=bearer(john["token"]),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert re.fullmatch(r"[0-9A-F]{8}", data["code"])
    assert data["family_id"] == family["id"]

    expires_at = datetime.fromisoformat(data["expires_at"])
    expected = utcnow() + timedelta(days=3)
    assert abs((expires_at - expected).total_seconds()) < 60


@pytest.mark.asyncio
async def test_codes_are_unique(client: AsyncClient, register):
    john = await register("john")
    family = await create_family(client, john["token"])

    codes = set()
    for _ in range(5):
        response = await client.post(
            "/families/invite", json={"family_id": family["id"]}, headers=bearer(john["token"])
        )
        codes.add(response.json()["data"]["code"])

    assert len(codes) == 5


@pytest.mark.asyncio
async def test_member_cannot_invite(client: AsyncClient, register):
    john = await register("john")
    jane = await register("jane")
    family = await create_family(client, john["token"])
    await join(client, john["token"], jane["token"], family["id"])

    response = await client.post(
        "/families/invite", json={"family_id": family["id"]}, headers=bearer(jane["token"])
    )

    assert response.status_code == 403
    body = response.json()
    assert body["error"]["code"] == "NOT_FAMILY_OWNER"
    assert body["message"] == "You are not authorized to invite members to this family."


@pytest.mark.asyncio
async def test_invite_unknown_family(client: AsyncClient, register):
    john = await register("john")

    response = await client.post(
        "/families/invite", json={"family_id": str(uuid4())}, headers=bearer(john["token"])
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_invite_invalid_email(client: AsyncClient, register):
    john = await register("john")
    family = await create_family(client, john["token"])

    response = await client.post(
        "/families/invite",
        json={"family_id": family["id"], "email": "not-an-email"},
        headers=bearer(john["token"]),
    )

    assert response.status_code == 422
    assert response.json()["errors"]["email"] == ["The email must be a valid email address."]


@pytest.mark.asyncio
async def test_empty_email_is_treated_as_absent(client: AsyncClient, register):
    john = await register("john")
    family = await create_family(client, john["token"])

    response = await client.post(
        "/families/invite",
        json={"family_id": family["id"], "email": ""},
        headers=bearer(john["token"]),
    )

    assert response.status_code == 200
    assert re.fullmatch(r"[0-9A-F]{8}", response.json()["data"]["code"])
