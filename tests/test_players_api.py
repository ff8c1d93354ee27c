"""HTTP tests for the /api/v1/players endpoints."""

import uuid


def _player_by_name(team, name):
    return next(p for p in team["players"] if p["name"] == name)


def test_list_players_across_teams(client, created_team):
    client.post("/api/v1/teams", json={"name": "Sparks", "players": [{"name": "Mia Johnson", "position": "Guard"}]})

    resp = client.get("/api/v1/players")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["Ava Martinez", "Liam Chen", "Mia Johnson"]

    resp = client.get("/api/v1/players", params={"team_id": created_team["id"]})
    assert [p["name"] for p in resp.json()] == ["Ava Martinez", "Liam Chen"]

    resp = client.get("/api/v1/players", params={"position": "goalkeeper"})
    assert [p["name"] for p in resp.json()] == ["Liam Chen"]


def test_get_player(client, created_team):
    liam = _player_by_name(created_team, "Liam Chen")
    resp = client.get(f"/api/v1/players/{liam['id']}")
    assert resp.status_code == 200
    assert resp.json() == liam


def test_get_player_not_found(client):
    resp = client.get(f"/api/v1/players/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Player not found"


def test_update_player_fields(client, created_team):
    ava = _player_by_name(created_team, "Ava Martinez")
    resp = client.patch(f"/api/v1/players/{ava['id']}", json={"position": "Midfielder", "birthdate": "2016-03-15"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["position"] == "Midfielder"
    assert body["birthdate"] == "2016-03-15"
    assert body["name"] == "Ava Martinez"
    assert body["team_id"] == created_team["id"]


def test_update_player_rejects_empty_name(client, created_team):
    ava = _player_by_name(created_team, "Ava Martinez")
    assert client.patch(f"/api/v1/players/{ava['id']}", json={"name": ""}).status_code == 422
    assert client.patch(f"/api/v1/players/{ava['id']}", json={"name": None}).status_code == 422
    assert client.patch(f"/api/v1/players/{ava['id']}", json={"team_id": None}).status_code == 422


def test_move_player_to_another_team(client, created_team):
    other = client.post("/api/v1/teams", json={"name": "Sparks"}).json()
    liam = _player_by_name(created_team, "Liam Chen")

    resp = client.patch(f"/api/v1/players/{liam['id']}", json={"team_id": other["id"]})
    assert resp.status_code == 200
    assert resp.json()["team_id"] == other["id"]

    assert [p["name"] for p in client.get(f"/api/v1/teams/{other['id']}/players").json()] == ["Liam Chen"]
    assert [p["name"] for p in client.get(f"/api/v1/teams/{created_team['id']}/players").json()] == ["Ava Martinez"]


def test_move_player_to_missing_team(client, created_team):
    liam = _player_by_name(created_team, "Liam Chen")
    resp = client.patch(f"/api/v1/players/{liam['id']}", json={"team_id": str(uuid.uuid4())})
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Team not found"
    # unchanged
    assert client.get(f"/api/v1/players/{liam['id']}").json()["team_id"] == created_team["id"]


def test_update_player_not_found(client):
    resp = client.patch(f"/api/v1/players/{uuid.uuid4()}", json={"position": "Guard"})
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Player not found"


def test_delete_player(client, created_team):
    ava = _player_by_name(created_team, "Ava Martinez")
    resp = client.delete(f"/api/v1/players/{ava['id']}")
    assert resp.status_code == 204
    assert client.get(f"/api/v1/players/{ava['id']}").status_code == 404

    team = client.get(f"/api/v1/teams/{created_team['id']}").json()
    assert team["player_count"] == 1
    assert client.delete(f"/api/v1/players/{ava['id']}").status_code == 404
