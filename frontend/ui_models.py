"""
ui_models.py - UI-facing shapes of the API resources.

The API speaks camelCase for teams and matches and snake_case elsewhere;
the Streamlit pages only ever see these dataclasses, with every optional
field filled in (text -> "", counts -> 0, containers -> empty, stats zeroed).
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from utils.constants import (
    DEFAULT_NEWS_CATEGORY,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    MATCH_STAT_KEYS,
    PLAYER_STAT_KEYS,
    TEAM_STAT_KEYS,
)


def _text(data: Dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    return default if value is None else str(value)


def _int(data: Dict[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key)
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def _stats(raw: Any, keys: List[str]) -> Dict[str, int]:
    raw = raw if isinstance(raw, dict) else {}
    return {key: _int(raw, key) for key in keys}


def _list(raw: Any) -> List[str]:
    return [str(item) for item in raw] if isinstance(raw, list) else []


def _date(raw: Any) -> Optional[date]:
    if not raw:
        return None
    try:
        return date.fromisoformat(str(raw)[:10])
    except ValueError:
        return None


# =============================================================================
# VIEWS
# =============================================================================

@dataclass
class TeamView:
    id: str
    name: str
    short_name: str = ""
    logo: str = ""
    background_image: str = ""
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    description: str = ""
    coach: str = ""
    founded_year: Optional[int] = None
    stadium: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    website: str = ""
    achievements: List[str] = field(default_factory=list)
    social_links: Dict[str, str] = field(default_factory=dict)
    stats: Dict[str, int] = field(default_factory=lambda: {key: 0 for key in TEAM_STAT_KEYS})
    created_at: str = ""

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "TeamView":
        social = data.get("socialLinks")
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            short_name=_text(data, "shortName"),
            logo=_text(data, "logo"),
            background_image=_text(data, "backgroundImage"),
            primary_color=_text(data, "primaryColor", DEFAULT_PRIMARY_COLOR),
            secondary_color=_text(data, "secondaryColor", DEFAULT_SECONDARY_COLOR),
            description=_text(data, "description"),
            coach=_text(data, "coach"),
            founded_year=data.get("foundedYear"),
            stadium=_text(data, "stadium"),
            address=_text(data, "address"),
            city=_text(data, "city"),
            country=_text(data, "country"),
            website=_text(data, "website"),
            achievements=_list(data.get("achievements")),
            social_links={str(k): str(v) for k, v in social.items()} if isinstance(social, dict) else {},
            stats=_stats(data.get("stats"), TEAM_STAT_KEYS),
            created_at=_text(data, "created_at"),
        )


@dataclass
class PlayerView:
    id: str
    name: str
    position: str
    team_id: Optional[str] = None
    team_name: str = ""
    number: int = 0
    nationality: str = ""
    age: int = 0
    height: int = 0
    weight: int = 0
    photo: str = ""
    stats: Dict[str, int] = field(default_factory=lambda: {key: 0 for key in PLAYER_STAT_KEYS})
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "PlayerView":
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            position=_text(data, "position"),
            team_id=data.get("team_id") or None,
            team_name=_text(data, "team_name"),
            number=_int(data, "number"),
            nationality=_text(data, "nationality"),
            age=_int(data, "age"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            photo=_text(data, "photo"),
            stats=_stats(data.get("stats"), PLAYER_STAT_KEYS),
            created_at=_text(data, "created_at"),
            updated_at=_text(data, "updated_at"),
        )


@dataclass
class CoachView:
    id: str
    name: str
    team_id: Optional[str] = None
    photo: str = ""
    nationality: str = ""
    age: int = 0
    experience: int = 0
    achievements: str = ""
    created_at: str = ""

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "CoachView":
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            team_id=data.get("team_id") or None,
            photo=_text(data, "photo"),
            nationality=_text(data, "nationality"),
            age=_int(data, "age"),
            experience=_int(data, "experience"),
            achievements=_text(data, "achievements"),
            created_at=_text(data, "created_at"),
        )


@dataclass
class MatchView:
    id: str
    date: Optional[date]
    opponent: str
    start_time: str = ""
    location: str = ""
    competition: str = ""
    status: str = "scheduled"
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    stats: Dict[str, int] = field(default_factory=lambda: {key: 0 for key in MATCH_STAT_KEYS})
    highlights: List[str] = field(default_factory=list)
    created_at: str = ""

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "MatchView":
        score = data.get("score") if isinstance(data.get("score"), dict) else {}
        return cls(
            id=_text(data, "id"),
            date=_date(data.get("date")),
            opponent=_text(data, "opponent"),
            start_time=_text(data, "startTime"),
            location=_text(data, "location"),
            competition=_text(data, "competition"),
            status=_text(data, "status", "scheduled"),
            home_score=score.get("home"),
            away_score=score.get("away"),
            stats=_stats(data.get("stats"), MATCH_STAT_KEYS),
            highlights=_list(data.get("highlights")),
            created_at=_text(data, "created_at"),
        )

    @property
    def score_label(self) -> str:
        if self.status != "completed" or self.home_score is None or self.away_score is None:
            return "-:-"
        return f"{self.home_score}:{self.away_score}"


@dataclass
class NewsView:
    id: str
    title: str
    content: str
    image: str = ""
    date: str = ""
    author: str = ""
    category: str = DEFAULT_NEWS_CATEGORY
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "NewsView":
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            content=_text(data, "content"),
            image=_text(data, "image"),
            date=_text(data, "date"),
            author=_text(data, "author"),
            category=_text(data, "category", DEFAULT_NEWS_CATEGORY),
            tags=_list(data.get("tags")),
        )


@dataclass
class MediaView:
    id: str
    title: str
    file_url: str
    type: str = "image"
    description: str = ""
    created_at: str = ""

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "MediaView":
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            file_url=_text(data, "file_url"),
            type=_text(data, "type", "image"),
            description=_text(data, "description"),
            created_at=_text(data, "created_at"),
        )
