"""
constants.py - Shared constants for the club site.

Includes:
- Entity names and their API paths
- Enumerations (player positions, match status, media types)
- Default composite values (team/player/match stats)
- Display labels and colours used by the Streamlit pages
"""

# ============================================================================
# 1. ENTITIES
# ============================================================================

ENTITIES = ['teams', 'players', 'coaches', 'matches', 'news', 'media']

ENTITY_LABELS = {
    'teams': 'Team',
    'players': 'Player',
    'coaches': 'Coach',
    'matches': 'Match',
    'news': 'News',
    'media': 'Media',
}

# ============================================================================
# 2. ENUMERATIONS
# ============================================================================

PLAYER_POSITIONS = ['goalkeeper', 'defender', 'midfielder', 'forward']

MATCH_STATUSES = ['scheduled', 'live', 'completed', 'cancelled']

MEDIA_TYPES = ['image', 'video']

DEFAULT_NEWS_CATEGORY = 'general'

# ============================================================================
# 3. DEFAULT COMPOSITE VALUES
# ============================================================================

DEFAULT_PRIMARY_COLOR = '#000000'
DEFAULT_SECONDARY_COLOR = '#ffffff'

TEAM_STAT_KEYS = ['matches', 'wins', 'draws', 'losses', 'goalsFor', 'goalsAgainst', 'points']

PLAYER_STAT_KEYS = ['games', 'goals', 'assists', 'yellowCards', 'redCards']

MATCH_STAT_KEYS = ['possession', 'shots', 'shotsOnTarget', 'corners', 'fouls', 'yellowCards', 'redCards']

SOCIAL_PLATFORMS = ['website', 'facebook', 'instagram', 'twitter']

# ============================================================================
# 4. DISPLAY
# ============================================================================

POSITION_LABELS = {
    'goalkeeper': 'Goalkeeper',
    'defender': 'Defender',
    'midfielder': 'Midfielder',
    'forward': 'Forward',
}

STATUS_COLORS = {
    'scheduled': '#3498DB',  # Blue
    'live': '#E74C3C',  # Red
    'completed': '#2ECC71',  # Green
    'cancelled': '#95A5A6',  # Gray
}

RESULT_COLORS = {
    'wins': '#2ECC71',
    'draws': '#F1C40F',
    'losses': '#E74C3C',
}
