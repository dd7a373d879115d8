"""
models.py - SQLAlchemy ORM models for the club site.

Fixed columns hold scalar fields; composite fields (achievements, social
links, stats, score, highlights, tags) are stored as serialized JSON text
through the JSONText column type. Decoding happens here and only here:
a NULL, empty or malformed stored value reads back as an empty container.

Team references from players and coaches are declared as foreign keys but
SQLite enforcement is left off; the API checks them instead, and deleting a
team never cascades to its players or coaches.
"""

import json
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.types import TypeDecorator

from .database import Base

logger = logging.getLogger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite stores no offset)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class JSONText(TypeDecorator):
    """
    JSON value persisted in a TEXT column.

    Args:
        empty: container type (dict or list) returned for missing,
            malformed or wrongly-shaped stored values
    """

    impl = Text
    cache_ok = True

    def __init__(self, empty=dict, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.empty = empty

    def process_bind_param(self, value, dialect):
        if value is None:
            value = self.empty()
        return json.dumps(value, ensure_ascii=False)

    def process_result_value(self, value, dialect):
        if not value:
            return self.empty()
        try:
            decoded = json.loads(value)
        except (TypeError, ValueError):
            logger.warning(f"Discarding malformed JSON column value: {value[:80]!r}")
            return self.empty()
        if not isinstance(decoded, self.empty):
            return self.empty()
        return decoded


class Team(Base):
    __tablename__ = "teams"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    short_name = Column(String(50), nullable=False)
    logo = Column(Text, nullable=True)
    background_image = Column(Text, nullable=True)
    primary_color = Column(String(20), nullable=True)
    secondary_color = Column(String(20), nullable=True)
    description = Column(Text, nullable=True)
    coach = Column(String(255), nullable=True)
    founded_year = Column(Integer, nullable=True)
    stadium = Column(String(255), nullable=True)
    address = Column(String(255), nullable=True)
    city = Column(String(255), nullable=True)
    country = Column(String(255), nullable=True)
    website = Column(Text, nullable=True)

    # Example: ["Cup winner 2019", "League champion 2021"]
    achievements = Column(JSONText(list), nullable=False, default=list)
    # Example: {"instagram": "https://instagram.com/club"}
    social_links = Column(JSONText(dict), nullable=False, default=dict)
    # Example: {"matches": 10, "wins": 6, "draws": 2, "losses": 2, ...}
    stats = Column(JSONText(dict), nullable=False, default=dict)

    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Team(id={self.id}, name='{self.name}')>"


class Player(Base):
    __tablename__ = "players"

    id = Column(String(36), primary_key=True, default=new_id)
    team_id = Column(String(36), ForeignKey("teams.id"), nullable=True)
    # Denormalized team display name
    team_name = Column(String(255), nullable=True)
    name = Column(String(255), nullable=False)
    position = Column(String(20), nullable=False)
    number = Column(Integer, nullable=True)
    nationality = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    weight = Column(Integer, nullable=True)
    photo = Column(Text, nullable=True)

    # Example: {"games": 12, "goals": 4, "assists": 2, "yellowCards": 1, "redCards": 0}
    stats = Column(JSONText(dict), nullable=False, default=dict)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Player(id={self.id}, name='{self.name}', team_id={self.team_id})>"


class Coach(Base):
    __tablename__ = "coaches"

    id = Column(String(36), primary_key=True, default=new_id)
    team_id = Column(String(36), ForeignKey("teams.id"), nullable=True)
    name = Column(String(255), nullable=False)
    photo = Column(Text, nullable=True)
    nationality = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    experience = Column(Integer, nullable=True)
    achievements = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Coach(id={self.id}, name='{self.name}', team_id={self.team_id})>"


class Match(Base):
    __tablename__ = "matches"

    id = Column(String(36), primary_key=True, default=new_id)
    date = Column(Date, nullable=False)
    start_time = Column(String(10), nullable=True)
    opponent = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    competition = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default="scheduled")

    # Example: {"home": 2, "away": 1}
    score = Column(JSONText(dict), nullable=False, default=dict)
    # Example: {"possession": 55, "shots": 14, "shotsOnTarget": 6, ...}
    stats = Column(JSONText(dict), nullable=False, default=dict)
    # Example: ["12' Goal by #9", "67' Penalty saved"]
    highlights = Column(JSONText(list), nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Match(id={self.id}, date={self.date}, opponent='{self.opponent}')>"


class News(Base):
    __tablename__ = "news"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    image = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, default=utcnow)
    author = Column(String(255), nullable=True)
    category = Column(String(100), nullable=False, default="general")
    tags = Column(JSONText(list), nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<News(id={self.id}, title='{self.title}')>"


class Media(Base):
    __tablename__ = "media"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    file_url = Column(Text, nullable=False)
    type = Column(String(10), nullable=False)

    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Media(id={self.id}, title='{self.title}', type='{self.type}')>"
