import pytest
from fastapi.testclient import TestClient

from backend.app import models
from backend.app.database import Database
from backend.app.main import create_app
from etl.seed_data import DEMO_PLAYERS, DEMO_TEAM_ID, seed_demo_data
from utils.config_loader import AppSettings


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


def test_seed_inserts_team_and_players(database):
    session = database.session()
    try:
        inserted = seed_demo_data(session)
        assert inserted == 1 + len(DEMO_PLAYERS)

        team = session.get(models.Team, DEMO_TEAM_ID)
        assert team.name == "Demo FC"
        assert team.stats["goalsFor"] == 0

        players = session.query(models.Player).all()
        assert {p.position for p in players} == {"goalkeeper", "defender", "midfielder", "forward"}
        assert all(p.team_name == "Demo FC" for p in players)
    finally:
        session.close()


def test_seed_is_idempotent(database):
    """Running the seed twice leaves a single copy of each row."""
    session = database.session()
    try:
        seed_demo_data(session)
        assert seed_demo_data(session) == 0
        assert session.query(models.Team).count() == 1
        assert session.query(models.Player).count() == len(DEMO_PLAYERS)
    finally:
        session.close()


def test_app_seeds_on_startup_when_enabled():
    settings = AppSettings(database_url="sqlite://", seed_demo_data=True)
    with TestClient(create_app(settings)) as client:
        players = client.get("/api/players", params={"teamId": DEMO_TEAM_ID}).json()
        assert len(players) == len(DEMO_PLAYERS)
        assert client.get(f"/api/teams/{DEMO_TEAM_ID}").json()["shortName"] == "DFC"
