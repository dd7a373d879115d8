
import pytest
from fastapi.testclient import TestClient
import sys
import os

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from backend.app.main import create_app
from frontend.api_client import ClubAPIClient
from utils.config_loader import AppSettings

# In-memory SQLite database for testing (one StaticPool connection per app)
SQLALCHEMY_DATABASE_URL = "sqlite://"


def make_client(enforce_team_reference: bool = True) -> TestClient:
    settings = AppSettings(
        database_url=SQLALCHEMY_DATABASE_URL,
        cors_origins=["*"],
        enforce_team_reference=enforce_team_reference,
    )
    return TestClient(create_app(settings))


@pytest.fixture(scope="function")
def client():
    """TestClient over a fresh in-memory database with the team check on."""
    with make_client() as c:
        yield c


@pytest.fixture(scope="function")
def unchecked_client():
    """TestClient with api.enforce_team_reference turned off."""
    with make_client(enforce_team_reference=False) as c:
        yield c


@pytest.fixture
def client_factory():
    """Builds further isolated clients inside one test."""
    return make_client


@pytest.fixture(scope="function")
def db_session(client):
    """Session on the same database the client's app is using."""
    session = client.app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api(client):
    """ClubAPIClient routed through the TestClient."""
    return ClubAPIClient(http_client=client)


@pytest.fixture
def team_payload():
    return {
        "name": "FC Test",
        "shortName": "FCT",
        "primaryColor": "#ff0000",
        "secondaryColor": "#ffffff",
        "stadium": "Test Arena",
        "foundedYear": 1923,
        "achievements": ["Cup winner 2019"],
        "socialLinks": {"instagram": "https://instagram.com/fctest"},
        "stats": {"matches": 10, "wins": 6, "draws": 2, "losses": 2, "goalsFor": 18, "goalsAgainst": 9, "points": 20},
    }


@pytest.fixture
def team(client, team_payload):
    """A stored team (wire representation)."""
    response = client.post("/api/teams", json=team_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def player_payload(team):
    return {
        "team_id": team["id"],
        "name": "Ivan Petrov",
        "position": "forward",
        "number": 9,
        "nationality": "Russia",
        "age": 22,
        "stats": {"games": 5, "goals": 3, "assists": 1, "yellowCards": 0, "redCards": 0},
    }
