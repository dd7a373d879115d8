"""
schemas.py - Pydantic schemas for API request/response validation.

Every entity has three schemas:
- <Entity>Base: editable fields with types, enums and defaults
- <Entity>Create: request body for POST and PUT (PUT is a full replace)
- <Entity>Out: response body, adds server-generated id and timestamps

Team and match payloads use camelCase keys on the wire (shortName,
startTime, ...); snake_case field names are accepted on input as well.
Player, coach, news and media payloads use snake_case keys.
"""

from datetime import date as date_type, datetime, timezone
from typing import Optional, List, Dict, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

Position = Literal["goalkeeper", "defender", "midfielder", "forward"]
MatchStatus = Literal["scheduled", "live", "completed", "cancelled"]
MediaType = Literal["image", "video"]


def _lower(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class CamelModel(BaseModel):
    """Base for payloads exchanged with camelCase keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# =============================================================================
# COMPOSITE FIELDS
# =============================================================================

class TeamStats(CamelModel):
    """Season statistics stored with a team."""
    matches: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    draws: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    goals_for: int = Field(0, ge=0)
    goals_against: int = Field(0, ge=0)
    points: int = Field(0, ge=0)


class PlayerStats(CamelModel):
    """Per-season player statistics."""
    games: int = Field(0, ge=0)
    goals: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    yellow_cards: int = Field(0, ge=0)
    red_cards: int = Field(0, ge=0)


class MatchScore(CamelModel):
    """Home/away score, meaningful once the match is completed."""
    home: Optional[int] = Field(None, ge=0)
    away: Optional[int] = Field(None, ge=0)


class MatchStats(CamelModel):
    possession: int = Field(0, ge=0, le=100, description="Possession percentage")
    shots: int = Field(0, ge=0)
    shots_on_target: int = Field(0, ge=0)
    corners: int = Field(0, ge=0)
    fouls: int = Field(0, ge=0)
    yellow_cards: int = Field(0, ge=0)
    red_cards: int = Field(0, ge=0)


# =============================================================================
# TEAM SCHEMAS
# =============================================================================

class TeamBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    short_name: str = Field(..., min_length=1, max_length=50)
    logo: Optional[str] = None
    background_image: Optional[str] = None
    primary_color: str = Field("#000000", pattern=r"^#[0-9a-fA-F]{3,8}$")
    secondary_color: str = Field("#ffffff", pattern=r"^#[0-9a-fA-F]{3,8}$")
    description: Optional[str] = None
    coach: Optional[str] = None
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)
    stadium: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    website: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)
    social_links: Dict[str, str] = Field(default_factory=dict)
    stats: TeamStats = Field(default_factory=TeamStats)


class TeamCreate(TeamBase):
    pass


class TeamOut(TeamBase):
    id: str
    created_at: datetime = Field(..., alias="created_at")


# =============================================================================
# PLAYER SCHEMAS
# =============================================================================

class PlayerBase(BaseModel):
    team_id: Optional[str] = None
    team_name: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    position: Position
    number: Optional[int] = Field(None, ge=0, le=99)
    nationality: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=100)
    height: Optional[int] = Field(None, ge=0, description="Height in cm")
    weight: Optional[int] = Field(None, ge=0, description="Weight in kg")
    photo: Optional[str] = None
    stats: PlayerStats = Field(default_factory=PlayerStats)

    @field_validator("position", mode="before")
    @classmethod
    def normalize_position(cls, value):
        return _lower(value)

    @field_validator("team_id", mode="before")
    @classmethod
    def blank_team_is_unassigned(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PlayerCreate(PlayerBase):
    pass


class PlayerOut(PlayerBase):
    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# =============================================================================
# COACH SCHEMAS
# =============================================================================

class CoachBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    team_id: Optional[str] = None
    photo: Optional[str] = None
    nationality: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=100)
    experience: Optional[int] = Field(None, ge=0, description="Years of experience")
    achievements: Optional[str] = None

    @field_validator("team_id", mode="before")
    @classmethod
    def blank_team_is_unassigned(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CoachCreate(CoachBase):
    pass


class CoachOut(CoachBase):
    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# =============================================================================
# MATCH SCHEMAS
# =============================================================================

class MatchBase(CamelModel):
    date: date_type
    start_time: Optional[str] = Field(None, pattern=r"^\d{1,2}:\d{2}$", description="Kickoff, HH:MM")
    opponent: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = None
    competition: Optional[str] = None
    status: MatchStatus = "scheduled"
    score: MatchScore = Field(default_factory=MatchScore)
    stats: MatchStats = Field(default_factory=MatchStats)
    highlights: List[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return _lower(value)


class MatchCreate(MatchBase):
    pass


class MatchOut(MatchBase):
    id: str
    created_at: datetime = Field(..., alias="created_at")
    updated_at: datetime = Field(..., alias="updated_at")


# =============================================================================
# NEWS SCHEMAS
# =============================================================================

class NewsBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    image: Optional[str] = None
    date: Optional[datetime] = Field(None, description="Publish date, defaults to creation time")
    author: Optional[str] = None
    category: str = Field("general", min_length=1)
    tags: List[str] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def date_as_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Offsets are converted to UTC; naive values are taken as UTC already."""
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @field_validator("tags")
    @classmethod
    def unique_tags(cls, tags: List[str]) -> List[str]:
        seen = []
        for tag in tags:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return seen


class NewsCreate(NewsBase):
    pass


class NewsOut(NewsBase):
    id: str
    date: datetime
    created_at: datetime

    class Config:
        from_attributes = True


# =============================================================================
# MEDIA SCHEMAS
# =============================================================================

class MediaBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    file_url: str = Field(..., min_length=1)
    type: MediaType

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value):
        return _lower(value)


class MediaCreate(MediaBase):
    pass


class MediaOut(MediaBase):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


# =============================================================================
# HEALTH / ERRORS
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str
    database: str
    counts: Dict[str, int] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Body returned with every 4xx/5xx response."""
    error: str
