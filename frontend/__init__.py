"""
frontend package - API client, edit buffers and Streamlit pages for the club site.
"""

from .api_client import (
    APIError,
    ClubAPIClient,
    API_BASE_URL,
)
from .ui_models import (
    CoachView,
    MatchView,
    MediaView,
    NewsView,
    PlayerView,
    TeamView,
)

__all__ = [
    "APIError",
    "ClubAPIClient",
    "API_BASE_URL",
    "CoachView",
    "MatchView",
    "MediaView",
    "NewsView",
    "PlayerView",
    "TeamView",
]
