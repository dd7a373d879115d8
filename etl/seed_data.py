"""
seed_data.py - Insert the demo team and roster into the SQLite database.

Features:
- Idempotent: rows are inserted with SQLite's ON CONFLICT DO NOTHING, so
  running the script twice leaves one copy of each row
- One demo player per position with zeroed season stats
- Console + rotating file logging when run as a script

Usage:
    python -m etl.seed_data
"""

import os
import logging
from logging.handlers import RotatingFileHandler

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from backend.app.database import Database
from backend.app.models import Team, Player, utcnow
from utils.config_loader import get_settings

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

logger = logging.getLogger(__name__)

DEMO_TEAM_ID = "team_1"

DEMO_TEAM = {
    "id": DEMO_TEAM_ID,
    "name": "Demo FC",
    "short_name": "DFC",
    "primary_color": "#000000",
    "secondary_color": "#ffffff",
    "achievements": [],
    "social_links": {},
    "stats": {
        "matches": 0, "wins": 0, "draws": 0, "losses": 0,
        "goalsFor": 0, "goalsAgainst": 0, "points": 0,
    },
}

DEMO_PLAYERS = [
    {"name": "Player 1", "position": "goalkeeper", "number": 1, "nationality": "Russia", "age": 25, "height": 190, "weight": 85},
    {"name": "Player 2", "position": "defender", "number": 4, "nationality": "Russia", "age": 23, "height": 185, "weight": 80},
    {"name": "Player 3", "position": "midfielder", "number": 8, "nationality": "Russia", "age": 24, "height": 180, "weight": 75},
    {"name": "Player 4", "position": "forward", "number": 9, "nationality": "Russia", "age": 22, "height": 178, "weight": 70},
]

EMPTY_PLAYER_STATS = {"games": 0, "goals": 0, "assists": 0, "yellowCards": 0, "redCards": 0}


def _insert_ignore(session: Session, model, values: dict) -> int:
    stmt = sqlite_insert(model).values(**values).on_conflict_do_nothing(index_elements=["id"])
    return session.execute(stmt).rowcount or 0


def seed_demo_data(session: Session) -> int:
    """
    Insert the demo team and its players when they are missing.

    Args:
        session: SQLAlchemy session bound to a database with the tables created

    Returns:
        Number of rows actually inserted
    """
    now = utcnow()
    inserted = _insert_ignore(session, Team, {**DEMO_TEAM, "created_at": now})

    for index, player in enumerate(DEMO_PLAYERS, start=1):
        inserted += _insert_ignore(session, Player, {
            **player,
            "id": f"player_{index}",
            "team_id": DEMO_TEAM_ID,
            "team_name": DEMO_TEAM["name"],
            "stats": EMPTY_PLAYER_STATS,
            "created_at": now,
            "updated_at": now,
        })

    session.commit()
    return inserted


def setup_logging():
    """Configure console and rotating file logging."""
    log_dir = os.path.join(project_root, 'etl', 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'seed.log')

    file_handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3)
    console_handler = logging.StreamHandler()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(file_handler)
    root.addHandler(console_handler)
    return root


def run_seed():
    """Create tables and insert the demo rows into the configured database."""
    setup_logging()
    settings = get_settings()

    database = Database(settings.database_url)
    database.create_all()
    session = database.session()
    try:
        inserted = seed_demo_data(session)
        logger.info(f"Inserted {inserted} demo rows into {settings.database_url}")
    except Exception:
        session.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        session.close()
        database.dispose()


if __name__ == "__main__":
    run_seed()
