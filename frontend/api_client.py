"""
api_client.py - Centralized API client for the FastAPI backend.

Provides:
- One resource accessor per entity (teams, players, coaches, matches, news,
  media) with list / get / create / update / delete
- Mapping of wire payloads into the UI dataclasses from ui_models
- Error handling with user-friendly messages raised as APIError

No retries and no caching: every call goes to the server.

Usage:
    from frontend.api_client import ClubAPIClient, APIError

    client = ClubAPIClient()
    try:
        teams = client.teams.list()
    except APIError as e:
        st.error(str(e))
"""

import os
import logging
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

import httpx

from .ui_models import CoachView, MatchView, MediaView, NewsView, PlayerView, TeamView
from utils.config_loader import ConfigLoader

logger = logging.getLogger(__name__)

# Backend URL - config.yaml (client.base_url), overridable via environment variable
API_BASE_URL = os.getenv("CLUB_API_URL") or ConfigLoader().get("client.base_url", "http://localhost:8000")

# Default timeout for API calls (seconds)
API_TIMEOUT = float(ConfigLoader().get("client.timeout", 10.0))

ViewT = TypeVar("ViewT")


class APIError(Exception):
    """Raised for any failed API call; str(error) is safe to show to users."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Server-provided error text, or a generic status message."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP error! status: {response.status_code}"


class ClubAPIClient:
    """
    HTTP client for the club site API.

    Args:
        base_url: API root, defaults to $CLUB_API_URL or http://localhost:8000
        timeout: Request timeout in seconds
        http_client: Pre-built httpx.Client (e.g. FastAPI's TestClient);
            when given, base_url and timeout are taken from it
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = API_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        self.timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url or API_BASE_URL, timeout=timeout)

        self.teams = Resource(self, "/api/teams", "team", "teams", TeamView.from_wire)
        self.players = PlayersResource(self, "/api/players", "player", "players", PlayerView.from_wire)
        self.coaches = Resource(self, "/api/coaches", "coach", "coaches", CoachView.from_wire)
        self.matches = Resource(self, "/api/matches", "match", "matches", MatchView.from_wire)
        self.news = Resource(self, "/api/news", "news item", "news", NewsView.from_wire)
        self.media = Resource(self, "/api/media", "media item", "media", MediaView.from_wire)

    def request(
        self,
        method: str,
        endpoint: str,
        action: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body (None for 204).

        Args:
            method: HTTP method ('GET', 'POST', 'PUT', 'DELETE')
            endpoint: API path (e.g., '/api/teams')
            action: Human description used in error messages ("fetch teams")
            params: Query parameters
            json_body: JSON body for POST/PUT

        Raises:
            APIError: transport failure, non-2xx status or unreadable body
        """
        try:
            response = self._http.request(method, endpoint, params=params, json=json_body)
        except (httpx.ConnectError, httpx.TimeoutException) as e:
            logger.warning(f"{method} {endpoint} failed: {e!r}")
            raise APIError(f"Failed to {action}. Please check if the server is running.")
        except httpx.HTTPError as e:
            raise APIError(f"Failed to {action}: {e}")

        if not response.is_success:
            message = _error_message(response)
            logger.error(f"API error on {method} {endpoint}: {response.status_code} {message}")
            raise APIError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise APIError("Failed to parse server response", status_code=response.status_code)

    def health(self) -> Dict[str, Any]:
        return self.request("GET", "/health", "check backend health")

    def is_available(self) -> bool:
        """Quick check if backend is reachable."""
        try:
            self.health()
            return True
        except APIError:
            return False

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class Resource(Generic[ViewT]):
    """CRUD calls for one entity collection."""

    def __init__(
        self,
        client: ClubAPIClient,
        path: str,
        label: str,
        plural: str,
        to_view: Callable[[Dict[str, Any]], ViewT],
    ):
        self.client = client
        self.path = path
        self.label = label
        self.plural = plural
        self.to_view = to_view

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[ViewT]:
        rows = self.client.request("GET", self.path, f"fetch {self.plural}", params=params)
        return [self.to_view(row) for row in rows or []]

    def get(self, entity_id: str) -> ViewT:
        row = self.client.request("GET", f"{self.path}/{entity_id}", f"fetch {self.label}")
        return self.to_view(row)

    def create(self, payload: Dict[str, Any]) -> ViewT:
        row = self.client.request("POST", self.path, f"create {self.label}", json_body=payload)
        return self.to_view(row)

    def update(self, entity_id: str, payload: Dict[str, Any]) -> ViewT:
        row = self.client.request("PUT", f"{self.path}/{entity_id}", f"update {self.label}", json_body=payload)
        return self.to_view(row)

    def delete(self, entity_id: str) -> None:
        self.client.request("DELETE", f"{self.path}/{entity_id}", f"delete {self.label}")


class PlayersResource(Resource[PlayerView]):

    def list(self, team_id: Optional[str] = None) -> List[PlayerView]:
        params = {"team_id": team_id} if team_id else None
        return super().list(params=params)
