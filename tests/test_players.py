from fastapi import status


def test_create_player(client, team, player_payload):
    response = client.post("/api/players", json=player_payload)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"]
    assert data["team_id"] == team["id"]
    assert data["team_name"] == "FC Test"
    assert data["position"] == "forward"
    assert data["stats"] == {"games": 5, "goals": 3, "assists": 1, "yellowCards": 0, "redCards": 0}
    assert data["created_at"] and data["updated_at"]


def test_team_name_comes_from_team(client, player_payload):
    """A submitted team_name is replaced by the referenced team's name."""
    response = client.post("/api/players", json={**player_payload, "team_name": "Something else"})
    assert response.json()["team_name"] == "FC Test"


def test_position_is_case_insensitive(client, player_payload):
    response = client.post("/api/players", json={**player_payload, "position": "Goalkeeper"})
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["position"] == "goalkeeper"


def test_invalid_position_rejected(client, player_payload):
    response = client.post("/api/players", json={**player_payload, "position": "striker"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "position" in response.json()["error"]


def test_shirt_number_range(client, player_payload):
    response = client.post("/api/players", json={**player_payload, "number": 100})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_unassigned_player(client):
    """No team_id (or a blank one) stores an unassigned player."""
    for team_id in (None, ""):
        response = client.post("/api/players", json={"name": "Free Agent", "position": "defender", "team_id": team_id})
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["team_id"] is None
        assert response.json()["team_name"] is None


def test_unknown_team_rejected(client, player_payload):
    response = client.post("/api/players", json={**player_payload, "team_id": "no-such-team"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Team not found"}
    assert client.get("/api/players").json() == []


def test_unknown_team_stored_when_check_disabled(unchecked_client):
    """With the team check off the reference is kept as submitted."""
    response = unchecked_client.post("/api/players", json={
        "team_id": "no-such-team",
        "team_name": "Ghost FC",
        "name": "Orphan",
        "position": "midfielder",
    })
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["team_id"] == "no-such-team"
    assert response.json()["team_name"] == "Ghost FC"


def test_list_players_in_insertion_order(client, player_payload):
    for name in ["C", "A", "B"]:
        client.post("/api/players", json={**player_payload, "name": name})
    assert [p["name"] for p in client.get("/api/players").json()] == ["C", "A", "B"]


def test_filter_players_by_team(client, team, player_payload):
    other = client.post("/api/teams", json={"name": "Other", "shortName": "OTH"}).json()
    client.post("/api/players", json=player_payload)
    client.post("/api/players", json={**player_payload, "name": "Other Player", "team_id": other["id"]})
    client.post("/api/players", json={"name": "Free Agent", "position": "defender"})

    response = client.get("/api/players", params={"team_id": team["id"]})
    assert [p["name"] for p in response.json()] == ["Ivan Petrov"]

    legacy = client.get("/api/players", params={"teamId": other["id"]})
    assert [p["name"] for p in legacy.json()] == ["Other Player"]

    assert len(client.get("/api/players").json()) == 3


def test_filter_by_unknown_team_is_empty(client, player_payload):
    client.post("/api/players", json=player_payload)
    assert client.get("/api/players", params={"team_id": "missing"}).json() == []


def test_empty_team_filter_matches_nothing(client, player_payload):
    """An empty team_id is a filter value, not a missing filter."""
    client.post("/api/players", json=player_payload)
    client.post("/api/players", json={"name": "Free Agent", "position": "defender"})
    assert client.get("/api/players?team_id=").json() == []
    assert client.get("/api/players?teamId=").json() == []


def test_update_player(client, team, player_payload):
    player = client.post("/api/players", json=player_payload).json()
    response = client.put(f"/api/players/{player['id']}", json={
        "team_id": team["id"],
        "name": "Ivan Petrov",
        "position": "midfielder",
        "number": 10,
    })
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["position"] == "midfielder"
    assert data["number"] == 10
    # Full replace: fields left out are cleared
    assert data["nationality"] is None
    assert data["stats"]["goals"] == 0
    assert data["created_at"] == player["created_at"]


def test_update_player_moves_team(client, player_payload):
    player = client.post("/api/players", json=player_payload).json()
    other = client.post("/api/teams", json={"name": "Other", "shortName": "OTH"}).json()
    response = client.put(f"/api/players/{player['id']}", json={**player_payload, "team_id": other["id"]})
    assert response.json()["team_name"] == "Other"


def test_update_player_unknown_team(client, player_payload):
    player = client.post("/api/players", json=player_payload).json()
    response = client.put(f"/api/players/{player['id']}", json={**player_payload, "team_id": "missing"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get(f"/api/players/{player['id']}").json()["team_name"] == "FC Test"


def test_update_player_not_found(client, player_payload):
    response = client.put("/api/players/missing", json=player_payload)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Player not found"}


def test_delete_player(client, player_payload):
    player = client.post("/api/players", json=player_payload).json()
    assert client.delete(f"/api/players/{player['id']}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/players/{player['id']}").status_code == status.HTTP_404_NOT_FOUND
    assert client.delete(f"/api/players/{player['id']}").status_code == status.HTTP_404_NOT_FOUND
