from fastapi import status


MATCH = {
    "date": "2024-05-01",
    "startTime": "18:30",
    "opponent": "Rivals United",
    "location": "Test Arena",
    "competition": "League",
}


def test_create_match_defaults(client):
    response = client.post("/api/matches", json=MATCH)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["date"] == "2024-05-01"
    assert data["startTime"] == "18:30"
    assert data["status"] == "scheduled"
    assert data["score"] == {"home": None, "away": None}
    assert data["stats"]["shotsOnTarget"] == 0
    assert data["highlights"] == []
    assert data["created_at"] and data["updated_at"]


def test_completed_match_with_score(client):
    response = client.post("/api/matches", json={
        **MATCH,
        "status": "COMPLETED",
        "score": {"home": 2, "away": 1},
        "stats": {"possession": 58, "shots": 14, "shotsOnTarget": 6},
        "highlights": ["12' Goal", "67' Penalty saved"],
    })
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["status"] == "completed"
    assert data["score"] == {"home": 2, "away": 1}
    assert data["stats"]["possession"] == 58
    assert data["highlights"] == ["12' Goal", "67' Penalty saved"]


def test_invalid_status_rejected(client):
    response = client.post("/api/matches", json={**MATCH, "status": "postponed"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_invalid_date_rejected(client):
    response = client.post("/api/matches", json={**MATCH, "date": "not-a-date"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "date" in response.json()["error"]


def test_invalid_start_time_rejected(client):
    response = client.post("/api/matches", json={**MATCH, "startTime": "half past six"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_possession_out_of_range(client):
    response = client.post("/api/matches", json={**MATCH, "stats": {"possession": 120}})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_update_match_result(client):
    match = client.post("/api/matches", json=MATCH).json()
    response = client.put(f"/api/matches/{match['id']}", json={
        **MATCH, "status": "completed", "score": {"home": 0, "away": 3},
    })
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["score"] == {"home": 0, "away": 3}
    assert client.get(f"/api/matches/{match['id']}").json()["status"] == "completed"


def test_match_not_found(client):
    assert client.get("/api/matches/missing").json() == {"error": "Match not found"}
    assert client.put("/api/matches/missing", json=MATCH).status_code == status.HTTP_404_NOT_FOUND
    assert client.delete("/api/matches/missing").status_code == status.HTTP_404_NOT_FOUND


def test_delete_match(client):
    match = client.post("/api/matches", json=MATCH).json()
    assert client.delete(f"/api/matches/{match['id']}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get("/api/matches").json() == []
