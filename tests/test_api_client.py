import datetime

import httpx
import pytest

from frontend.api_client import APIError, ClubAPIClient
from frontend.ui_models import MatchView, PlayerView, TeamView


def mock_client(handler) -> ClubAPIClient:
    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://club.test")
    return ClubAPIClient(http_client=http)


# =============================================================================
# AGAINST THE REAL APP (TestClient injected)
# =============================================================================

def test_team_lifecycle(api):
    created = api.teams.create({"name": "Client FC", "shortName": "CFC", "stadium": "Home Ground"})
    assert isinstance(created, TeamView)
    assert created.short_name == "CFC"
    assert created.stats["points"] == 0

    assert [t.id for t in api.teams.list()] == [created.id]
    assert api.teams.get(created.id).stadium == "Home Ground"

    updated = api.teams.update(created.id, {"name": "Client FC", "shortName": "CFC2"})
    assert updated.short_name == "CFC2"
    assert updated.stadium == ""

    assert api.teams.delete(created.id) is None
    assert api.teams.list() == []


def test_players_filter(api, team, player_payload):
    api.players.create(player_payload)
    api.players.create({"name": "Free Agent", "position": "defender"})

    squad = api.players.list(team_id=team["id"])
    assert len(squad) == 1
    assert isinstance(squad[0], PlayerView)
    assert squad[0].team_name == "FC Test"
    assert squad[0].stats["goals"] == 3

    everyone = api.players.list()
    assert len(everyone) == 2
    assert everyone[1].team_id is None
    assert everyone[1].number == 0


def test_match_view(api):
    match = api.matches.create({
        "date": "2024-05-01", "opponent": "Rivals", "status": "completed", "score": {"home": 3, "away": 2},
    })
    assert isinstance(match, MatchView)
    assert match.date == datetime.date(2024, 5, 1)
    assert match.score_label == "3:2"


def test_not_found_raises_api_error(api):
    with pytest.raises(APIError) as exc_info:
        api.teams.get("missing")
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Team not found"


def test_validation_error_message(api):
    with pytest.raises(APIError) as exc_info:
        api.media.create({"title": "X", "file_url": "x", "type": "audio"})
    assert exc_info.value.status_code == 400
    assert "type" in exc_info.value.message


def test_health(api):
    assert api.health()["status"] == "healthy"
    assert api.is_available() is True


# =============================================================================
# TRANSPORT FAILURES (httpx.MockTransport)
# =============================================================================

def test_connection_refused_message():
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    client = mock_client(handler)
    with pytest.raises(APIError) as exc_info:
        client.teams.list()
    assert str(exc_info.value) == "Failed to fetch teams. Please check if the server is running."
    assert exc_info.value.status_code is None
    assert client.is_available() is False


def test_timeout_message():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(APIError) as exc_info:
        mock_client(handler).news.create({"title": "T", "content": "C"})
    assert str(exc_info.value) == "Failed to create news item. Please check if the server is running."
    assert exc_info.value.status_code is None


def test_status_without_error_body():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(APIError) as exc_info:
        mock_client(handler).matches.list()
    assert str(exc_info.value) == "HTTP error! status: 502"
    assert exc_info.value.status_code == 502


def test_unparseable_success_body():
    def handler(request):
        return httpx.Response(200, text="<html>not json</html>")

    with pytest.raises(APIError, match="Failed to parse server response"):
        mock_client(handler).coaches.list()


def test_request_shape():
    """Filters go in the query string, bodies as JSON."""
    seen = []

    def handler(request):
        seen.append(request)
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json=[])

    client = mock_client(handler)
    client.players.list(team_id="team_1")
    client.media.delete("m1")

    assert seen[0].url.path == "/api/players"
    assert seen[0].url.params["team_id"] == "team_1"
    assert seen[1].method == "DELETE"
    assert seen[1].url.path == "/api/media/m1"


def test_close_leaves_injected_client_open():
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    with ClubAPIClient(http_client=http):
        pass
    assert not http.is_closed
    http.close()
