"""
forms.py - Edit buffers behind the admin forms.

A buffer is a plain dict keyed by wire field names. The admin sections bind
widgets to it, and buffer_to_payload() turns it into a request body that
always carries every editable field: PUT replaces the whole record, so a
partial body would reset everything it leaves out.
"""

import copy
from dataclasses import asdict
from datetime import date
from typing import Any, Dict, List, Tuple

from utils.constants import (
    DEFAULT_NEWS_CATEGORY,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    MATCH_STAT_KEYS,
    PLAYER_STAT_KEYS,
    TEAM_STAT_KEYS,
)

# (wire key, view attribute, default) per entity
FIELDS: Dict[str, List[Tuple[str, str, Any]]] = {
    'teams': [
        ('name', 'name', ''),
        ('shortName', 'short_name', ''),
        ('logo', 'logo', ''),
        ('backgroundImage', 'background_image', ''),
        ('primaryColor', 'primary_color', DEFAULT_PRIMARY_COLOR),
        ('secondaryColor', 'secondary_color', DEFAULT_SECONDARY_COLOR),
        ('description', 'description', ''),
        ('coach', 'coach', ''),
        ('foundedYear', 'founded_year', None),
        ('stadium', 'stadium', ''),
        ('address', 'address', ''),
        ('city', 'city', ''),
        ('country', 'country', ''),
        ('website', 'website', ''),
        ('achievements', 'achievements', []),
        ('socialLinks', 'social_links', {}),
        ('stats', 'stats', {key: 0 for key in TEAM_STAT_KEYS}),
    ],
    'players': [
        ('name', 'name', ''),
        ('position', 'position', 'midfielder'),
        ('team_id', 'team_id', None),
        ('team_name', 'team_name', ''),
        ('number', 'number', 0),
        ('nationality', 'nationality', ''),
        ('age', 'age', 0),
        ('height', 'height', 0),
        ('weight', 'weight', 0),
        ('photo', 'photo', ''),
        ('stats', 'stats', {key: 0 for key in PLAYER_STAT_KEYS}),
    ],
    'coaches': [
        ('name', 'name', ''),
        ('team_id', 'team_id', None),
        ('photo', 'photo', ''),
        ('nationality', 'nationality', ''),
        ('age', 'age', 0),
        ('experience', 'experience', 0),
        ('achievements', 'achievements', ''),
    ],
    'matches': [
        ('date', 'date', None),
        ('startTime', 'start_time', ''),
        ('opponent', 'opponent', ''),
        ('location', 'location', ''),
        ('competition', 'competition', ''),
        ('status', 'status', 'scheduled'),
        ('homeScore', 'home_score', None),
        ('awayScore', 'away_score', None),
        ('stats', 'stats', {key: 0 for key in MATCH_STAT_KEYS}),
        ('highlights', 'highlights', []),
    ],
    'news': [
        ('title', 'title', ''),
        ('content', 'content', ''),
        ('image', 'image', ''),
        ('date', 'date', ''),
        ('author', 'author', ''),
        ('category', 'category', DEFAULT_NEWS_CATEGORY),
        ('tags', 'tags', []),
    ],
    'media': [
        ('title', 'title', ''),
        ('description', 'description', ''),
        ('file_url', 'file_url', ''),
        ('type', 'type', 'image'),
    ],
}

# Zero means "not set" for these; they are sent as null
OPTIONAL_NUMBERS = {
    'teams': {'foundedYear'},
    'players': {'age', 'height', 'weight'},
    'coaches': {'age', 'experience'},
    'matches': set(),
    'news': set(),
    'media': set(),
}

# Empty text is sent as null (required fields are left for the server to reject)
REQUIRED_TEXT = {
    'teams': {'name', 'shortName'},
    'players': {'name', 'position'},
    'coaches': {'name'},
    'matches': {'opponent'},
    'news': {'title', 'content'},
    'media': {'title', 'file_url', 'type'},
}


def blank_buffer(entity: str) -> Dict[str, Any]:
    """Buffer for a new record, every field at its default."""
    return {key: copy.deepcopy(default) for key, _, default in FIELDS[entity]}


def buffer_from_view(entity: str, view: Any) -> Dict[str, Any]:
    """Buffer pre-filled from a ui_models view, for editing an existing record."""
    values = asdict(view)
    buffer = {}
    for key, attr, default in FIELDS[entity]:
        value = values.get(attr, default)
        buffer[key] = copy.deepcopy(default) if value is None else copy.deepcopy(value)
    return buffer


def buffer_to_payload(entity: str, buffer: Dict[str, Any]) -> Dict[str, Any]:
    """
    Request body for POST/PUT built from a buffer.

    Args:
        entity: One of utils.constants.ENTITIES
        buffer: Dict produced by blank_buffer / buffer_from_view and edited by widgets

    Returns:
        JSON-ready dict containing every editable field
    """
    payload: Dict[str, Any] = {}
    for key, _, default in FIELDS[entity]:
        value = buffer.get(key, copy.deepcopy(default))
        if isinstance(value, str):
            value = value.strip()
            if not value and key not in REQUIRED_TEXT[entity]:
                value = None
        elif key in OPTIONAL_NUMBERS[entity] and not value:
            value = None
        elif isinstance(value, date):
            value = value.isoformat()
        payload[key] = value

    if entity == 'matches':
        payload['score'] = {'home': payload.pop('homeScore'), 'away': payload.pop('awayScore')}
    if entity == 'players' and not payload['team_id']:
        payload['team_name'] = None
    if entity == 'news' and not payload['date']:
        payload.pop('date')
    return payload


# =============================================================================
# TEXT HELPERS (list fields edited in text areas)
# =============================================================================

def lines_to_list(text: str) -> List[str]:
    """One item per non-blank line."""
    return [line.strip() for line in (text or '').splitlines() if line.strip()]


def list_to_lines(items: List[str]) -> str:
    return '\n'.join(items or [])


def parse_tags(text: str) -> List[str]:
    """Comma separated tags, duplicates dropped, order kept."""
    tags: List[str] = []
    for tag in (text or '').split(','):
        tag = tag.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags
