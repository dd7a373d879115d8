from fastapi import status
from sqlalchemy import text


def test_get_teams_empty(client):
    response = client.get("/api/teams")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_create_team(client, team_payload):
    """POST returns 201 and the stored record with camelCase keys."""
    response = client.post("/api/teams", json=team_payload)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"]
    assert data["name"] == "FC Test"
    assert data["shortName"] == "FCT"
    assert data["foundedYear"] == 1923
    assert data["achievements"] == ["Cup winner 2019"]
    assert data["socialLinks"] == {"instagram": "https://instagram.com/fctest"}
    assert data["stats"]["goalsFor"] == 18
    assert data["created_at"]


def test_create_team_fills_defaults(client):
    response = client.post("/api/teams", json={"name": "Minimal", "shortName": "MIN"})
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["primaryColor"] == "#000000"
    assert data["secondaryColor"] == "#ffffff"
    assert data["achievements"] == []
    assert data["socialLinks"] == {}
    assert data["stats"] == {
        "matches": 0, "wins": 0, "draws": 0, "losses": 0,
        "goalsFor": 0, "goalsAgainst": 0, "points": 0,
    }


def test_create_team_accepts_snake_case(client):
    response = client.post("/api/teams", json={"name": "Snake", "short_name": "SNK", "founded_year": 1950})
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["shortName"] == "SNK"
    assert response.json()["foundedYear"] == 1950


def test_create_team_rejects_bad_color(client):
    response = client.post("/api/teams", json={"name": "X", "shortName": "X", "primaryColor": "red"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_create_team_rejects_negative_stats(client):
    response = client.post("/api/teams", json={"name": "X", "shortName": "X", "stats": {"wins": -1}})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_team_by_id(client, team):
    response = client.get(f"/api/teams/{team['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == team


def test_get_team_not_found(client):
    response = client.get("/api/teams/does-not-exist")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Team not found"}


def test_list_keeps_insertion_order(client):
    for name in ["Zeta", "Alpha", "Mid"]:
        client.post("/api/teams", json={"name": name, "shortName": name[:3]})
    names = [t["name"] for t in client.get("/api/teams").json()]
    assert names == ["Zeta", "Alpha", "Mid"]


def test_update_team_replaces_record(client, team):
    """PUT is a full replace: fields left out return to their defaults."""
    response = client.put(f"/api/teams/{team['id']}", json={"name": "Renamed", "shortName": "REN"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == team["id"]
    assert data["name"] == "Renamed"
    assert data["stadium"] is None
    assert data["achievements"] == []
    assert data["stats"]["wins"] == 0
    assert data["created_at"] == team["created_at"]


def test_update_team_not_found(client, team_payload):
    response = client.put("/api/teams/missing", json=team_payload)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_update_team_invalid_payload(client, team):
    response = client.put(f"/api/teams/{team['id']}", json={"name": ""})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get(f"/api/teams/{team['id']}").json()["name"] == "FC Test"


def test_delete_team(client, team):
    response = client.delete(f"/api/teams/{team['id']}")
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""
    assert client.get(f"/api/teams/{team['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_team_not_found(client):
    response = client.delete("/api/teams/missing")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Team not found"}


def test_delete_team_keeps_players(client, team, player_payload):
    """Players keep their team_id after the team is removed."""
    player = client.post("/api/players", json=player_payload).json()
    client.delete(f"/api/teams/{team['id']}")
    response = client.get(f"/api/players/{player['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["team_id"] == team["id"]


def test_malformed_stored_json_reads_as_empty(client, team, db_session):
    """Unreadable composite columns come back as empty containers."""
    db_session.execute(
        text("UPDATE teams SET stats = :stats, achievements = :ach, social_links = '' WHERE id = :id"),
        {"stats": "{not json", "ach": '"not a list"', "id": team["id"]},
    )
    db_session.commit()

    response = client.get(f"/api/teams/{team['id']}")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["stats"]["wins"] == 0
    assert data["achievements"] == []
    assert data["socialLinks"] == {}


def test_rename_team_updates_player_team_name(client, team, player_payload):
    """Players show the team's current name after a rename."""
    player = client.post("/api/players", json=player_payload).json()
    client.put(f"/api/teams/{team['id']}", json={"name": "Renamed FC", "shortName": "RFC"})

    assert client.get(f"/api/players/{player['id']}").json()["team_name"] == "Renamed FC"
    listed = client.get("/api/players", params={"team_id": team["id"]}).json()
    assert [p["team_name"] for p in listed] == ["Renamed FC"]


def test_delete_team_clears_player_team_name(client, team, player_payload):
    player = client.post("/api/players", json=player_payload).json()
    free_agent = client.post("/api/players", json={"name": "Free Agent", "position": "defender"}).json()
    client.delete(f"/api/teams/{team['id']}")

    data = client.get(f"/api/players/{player['id']}").json()
    assert data["team_id"] == team["id"]
    assert data["team_name"] is None
    assert client.get(f"/api/players/{free_agent['id']}").json()["team_name"] is None


def test_rename_leaves_other_teams_players(client, team, player_payload):
    other = client.post("/api/teams", json={"name": "Other", "shortName": "OTH"}).json()
    player = client.post("/api/players", json={**player_payload, "team_id": other["id"]}).json()
    client.put(f"/api/teams/{team['id']}", json={"name": "Renamed FC", "shortName": "RFC"})
    assert client.get(f"/api/players/{player['id']}").json()["team_name"] == "Other"
