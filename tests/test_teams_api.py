"""HTTP tests for the /api/v1/teams endpoints."""

import uuid


def test_health(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Healthy"
    assert resp.headers.get("X-Correlation-ID")


def test_correlation_id_is_echoed(client):
    resp = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})
    assert resp.headers["X-Correlation-ID"] == "abc-123"


def test_create_team_with_roster(created_team):
    assert created_team["name"] == "Sprocket Strikers"
    assert created_team["sport"] == "Soccer"
    assert created_team["age_group"] == "U10"
    assert created_team["player_count"] == 2
    # roster comes back ordered by name
    assert [p["name"] for p in created_team["players"]] == ["Ava Martinez", "Liam Chen"]
    assert all(p["team_id"] == created_team["id"] for p in created_team["players"])
    assert created_team["players"][0]["birthdate"] == "2016-03-14"
    assert created_team["created_at"]
    assert created_team["updated_at"]


def test_create_team_without_players(client):
    resp = client.post("/api/v1/teams", json={"name": "Sprocket Sparks"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["players"] == []
    assert body["player_count"] == 0
    assert body["description"] is None


def test_create_team_trims_name(client):
    resp = client.post("/api/v1/teams", json={"name": "  Sprocket Sparks  "})
    assert resp.status_code == 201
    assert resp.json()["name"] == "Sprocket Sparks"


def test_create_team_requires_name(client):
    for payload in ({}, {"name": None}, {"name": ""}, {"name": "   "}):
        resp = client.post("/api/v1/teams", json=payload)
        assert resp.status_code == 422, payload
        body = resp.json()
        assert body["status"] == 422
        assert body["error"]["type"] == "validation_error"
        assert body["path"] == "/api/v1/teams"
        assert body["method"] == "POST"


def test_create_team_rejects_nameless_player(client):
    resp = client.post("/api/v1/teams", json={"name": "Sparks", "players": [{"position": "Guard"}]})
    assert resp.status_code == 422


def test_get_team(client, created_team):
    resp = client.get(f"/api/v1/teams/{created_team['id']}")
    assert resp.status_code == 200
    assert resp.json() == created_team


def test_get_team_not_found(client):
    resp = client.get(f"/api/v1/teams/{uuid.uuid4()}")
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"]["type"] == "http_error"
    assert body["error"]["message"] == "Team not found"


def test_get_team_invalid_id(client):
    resp = client.get("/api/v1/teams/not-a-uuid")
    assert resp.status_code == 422


def test_list_teams_ordered_and_filtered(client):
    for name, sport, age in [
        ("Zebras", "Soccer", "U12"),
        ("Aces", "Basketball", "U10"),
        ("Moose", "Soccer", "U10"),
    ]:
        assert client.post("/api/v1/teams", json={"name": name, "sport": sport, "age_group": age}).status_code == 201

    resp = client.get("/api/v1/teams")
    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()] == ["Aces", "Moose", "Zebras"]

    resp = client.get("/api/v1/teams", params={"sport": "soccer"})
    assert [t["name"] for t in resp.json()] == ["Moose", "Zebras"]

    resp = client.get("/api/v1/teams", params={"sport": "Soccer", "age_group": "U10"})
    assert [t["name"] for t in resp.json()] == ["Moose"]

    resp = client.get("/api/v1/teams", params={"search": "OS"})
    assert [t["name"] for t in resp.json()] == ["Moose"]

    resp = client.get("/api/v1/teams", params={"limit": 1, "offset": 1})
    assert [t["name"] for t in resp.json()] == ["Moose"]


def test_list_teams_search_matches_wildcard_characters_literally(client):
    for name in ("Aces", "Moose", "100% Hustle"):
        assert client.post("/api/v1/teams", json={"name": name}).status_code == 201

    resp = client.get("/api/v1/teams", params={"search": "%"})
    assert [t["name"] for t in resp.json()] == ["100% Hustle"]

    resp = client.get("/api/v1/teams", params={"search": "_"})
    assert resp.json() == []


def test_list_teams_reports_player_count(client, created_team):
    resp = client.get("/api/v1/teams")
    assert resp.json()[0]["player_count"] == 2
    assert "players" not in resp.json()[0]


def test_list_teams_rejects_bad_paging(client):
    assert client.get("/api/v1/teams", params={"limit": 0}).status_code == 422
    assert client.get("/api/v1/teams", params={"offset": -1}).status_code == 422


def test_update_team_partial(client, created_team):
    resp = client.patch(
        f"/api/v1/teams/{created_team['id']}",
        json={"description": "Travel squad", "age_group": "U11"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["description"] == "Travel squad"
    assert body["age_group"] == "U11"
    assert body["name"] == created_team["name"]
    assert body["sport"] == created_team["sport"]
    assert len(body["players"]) == 2


def test_update_team_can_clear_optional_field(client, created_team):
    resp = client.patch(f"/api/v1/teams/{created_team['id']}", json={"description": None})
    assert resp.status_code == 200
    assert resp.json()["description"] is None


def test_update_team_rejects_null_name(client, created_team):
    resp = client.patch(f"/api/v1/teams/{created_team['id']}", json={"name": None})
    assert resp.status_code == 422
    resp = client.get(f"/api/v1/teams/{created_team['id']}")
    assert resp.json()["name"] == "Sprocket Strikers"


def test_update_team_not_found(client):
    resp = client.patch(f"/api/v1/teams/{uuid.uuid4()}", json={"name": "Ghosts"})
    assert resp.status_code == 404


def test_delete_team_removes_players(client, created_team):
    player_id = created_team["players"][0]["id"]
    resp = client.delete(f"/api/v1/teams/{created_team['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get(f"/api/v1/teams/{created_team['id']}").status_code == 404
    assert client.get(f"/api/v1/players/{player_id}").status_code == 404
    assert client.get("/api/v1/players").json() == []


def test_delete_team_not_found(client):
    assert client.delete(f"/api/v1/teams/{uuid.uuid4()}").status_code == 404


def test_add_and_list_team_players(client, created_team):
    team_id = created_team["id"]
    resp = client.post(
        f"/api/v1/teams/{team_id}/players",
        json={"name": "Noah Patel", "position": "Defender"},
    )
    assert resp.status_code == 201
    player = resp.json()
    assert player["team_id"] == team_id
    assert player["birthdate"] is None

    resp = client.get(f"/api/v1/teams/{team_id}/players")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["Ava Martinez", "Liam Chen", "Noah Patel"]

    assert client.get(f"/api/v1/teams/{team_id}").json()["player_count"] == 3


def test_add_player_to_missing_team(client):
    resp = client.post(f"/api/v1/teams/{uuid.uuid4()}/players", json={"name": "Nobody"})
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Team not found"


def test_list_players_of_missing_team(client):
    assert client.get(f"/api/v1/teams/{uuid.uuid4()}/players").status_code == 404


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/v1/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["error"]["type"] == "http_error"
