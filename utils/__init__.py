"""
utils/__init__.py - Package initialization for utility modules

Exports commonly used constants and configuration helpers for easy importing:
    from utils import ConfigLoader, get_settings, PLAYER_POSITIONS
"""

from .constants import (
    ENTITIES,
    ENTITY_LABELS,
    PLAYER_POSITIONS,
    MATCH_STATUSES,
    MEDIA_TYPES,
    DEFAULT_NEWS_CATEGORY,
    TEAM_STAT_KEYS,
    PLAYER_STAT_KEYS,
    MATCH_STAT_KEYS,
    POSITION_LABELS,
)

from .config_loader import (
    ConfigLoader,
    AppSettings,
    get_settings,
)

__all__ = [
    'ENTITIES',
    'ENTITY_LABELS',
    'PLAYER_POSITIONS',
    'MATCH_STATUSES',
    'MEDIA_TYPES',
    'DEFAULT_NEWS_CATEGORY',
    'TEAM_STAT_KEYS',
    'PLAYER_STAT_KEYS',
    'MATCH_STAT_KEYS',
    'POSITION_LABELS',
    'ConfigLoader',
    'AppSettings',
    'get_settings',
]
