"""
Tests the event endpoints.
"""

import pytest


def as_user(user_id: str) -> dict[str, str]:
    return {"X-User-Id": user_id}


async def create_event(client, owner: str = "owner") -> str:
    response = await client.put(
        "/events", json={"title": "Friday night football"}, headers=as_user(owner)
    )
    assert response.status_code == 200
    return response.json()["event_id"]


@pytest.mark.asyncio(loop_scope="session")
async def test_event_lifecycle(client):
    event_id = await create_event(client)

    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "admin", "permission": "admin"},
        headers=as_user("owner"),
    )
    assert response.status_code == 200
    assert {m["id"] for m in response.json()} == {"owner", "admin"}

    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "player"},
        headers=as_user("admin"),
    )
    assert response.status_code == 200

    response = await client.put(
        f"/events/{event_id}/matches",
        json={"home_team": "Reds", "away_team": "Blues"},
        headers=as_user("admin"),
    )
    assert response.status_code == 200

    response = await client.get(f"/events/{event_id}", headers=as_user("player"))
    assert response.status_code == 200
    assert {m["id"]: m["permission"] for m in response.json()["members"]} == {
        "owner": "owner",
        "admin": "admin",
        "player": "user",
    }

    response = await client.get(f"/events/{event_id}/matches", headers=as_user("player"))
    assert response.status_code == 200
    assert len(response.json()) == 1

    response = await client.get("/events/list", headers=as_user("player"))
    assert event_id in [e["event_id"] for e in response.json()]

    # Plain members cannot delete
    response = await client.delete(f"/events/{event_id}", headers=as_user("player"))
    assert response.status_code == 403
    insufficient_detail = response.json()["detail"]
    assert "does not have permission" in insufficient_detail

    # Neither can outsiders
    response = await client.delete(f"/events/{event_id}", headers=as_user("stranger"))
    assert response.status_code == 403
    not_member_detail = response.json()["detail"]
    assert "is not a member" in not_member_detail
    assert not_member_detail != insufficient_detail

    response = await client.get(f"/events/{event_id}/matches", headers=as_user("player"))
    assert len(response.json()) == 1

    response = await client.delete(f"/events/{event_id}", headers=as_user("admin"))
    assert response.status_code == 204

    response = await client.get(f"/events/{event_id}", headers=as_user("owner"))
    assert response.status_code == 404

    response = await client.delete(f"/events/{event_id}", headers=as_user("owner"))
    assert response.status_code == 404


@pytest.mark.asyncio(loop_scope="session")
async def test_plain_member_cannot_change_event(client):
    event_id = await create_event(client)

    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "player"},
        headers=as_user("owner"),
    )
    assert response.status_code == 200

    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "friend"},
        headers=as_user("player"),
    )
    assert response.status_code == 403

    response = await client.put(
        f"/events/{event_id}/matches",
        json={"home_team": "Reds", "away_team": "Blues"},
        headers=as_user("player"),
    )
    assert response.status_code == 403

    response = await client.post(
        f"/events/{event_id}/members", json={}, headers=as_user("owner")
    )
    assert response.status_code == 400

    response = await client.delete(f"/events/{event_id}", headers=as_user("owner"))
    assert response.status_code == 204


@pytest.mark.asyncio(loop_scope="session")
async def test_missing_user_header(client):
    response = await client.get("/events/list")
    assert response.status_code == 422


@pytest.mark.asyncio(loop_scope="session")
async def test_get_match(client):
    event_id = await create_event(client)
    other_id = await create_event(client)

    response = await client.put(
        f"/events/{event_id}/matches",
        json={"home_team": "Reds", "away_team": "Blues"},
        headers=as_user("owner"),
    )
    match_id = response.json()["match_id"]

    response = await client.get(
        f"/events/{event_id}/matches/{match_id}", headers=as_user("owner")
    )
    assert response.status_code == 200
    assert response.json()["home_team"] == "Reds"

    response = await client.get(
        f"/events/{event_id}/matches/does_not_exist", headers=as_user("owner")
    )
    assert response.status_code == 404

    # A match is only visible through its own event
    response = await client.get(
        f"/events/{other_id}/matches/{match_id}", headers=as_user("owner")
    )
    assert response.status_code == 404

    for id in (event_id, other_id):
        response = await client.delete(f"/events/{id}", headers=as_user("owner"))
        assert response.status_code == 204

    response = await client.get(
        f"/events/{event_id}/matches/{match_id}", headers=as_user("owner")
    )
    assert response.status_code == 404


@pytest.mark.asyncio(loop_scope="session")
async def test_only_owners_change_ownership(client):
    event_id = await create_event(client)

    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "admin", "permission": "admin"},
        headers=as_user("owner"),
    )
    assert response.status_code == 200

    # Admins cannot promote to owner
    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "player", "permission": "owner"},
        headers=as_user("admin"),
    )
    assert response.status_code == 403

    # ...nor demote or remove the owner
    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "owner", "permission": "user"},
        headers=as_user("admin"),
    )
    assert response.status_code == 403

    response = await client.post(
        f"/events/{event_id}/members",
        json={"remove_user_id": "owner"},
        headers=as_user("admin"),
    )
    assert response.status_code == 403

    response = await client.get(f"/events/{event_id}", headers=as_user("owner"))
    assert {m["id"]: m["permission"] for m in response.json()["members"]} == {
        "owner": "owner",
        "admin": "admin",
    }

    # Owners can
    response = await client.post(
        f"/events/{event_id}/members",
        json={"add_user_id": "admin", "permission": "owner"},
        headers=as_user("owner"),
    )
    assert response.status_code == 200
    assert {m["permission"] for m in response.json()} == {"owner"}

    response = await client.delete(f"/events/{event_id}", headers=as_user("owner"))
    assert response.status_code == 204
