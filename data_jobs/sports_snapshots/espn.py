"""
ESPN site API client for team profiles and schedules (public, no key)
"""

from typing import Optional, Union

import requests

from .config import ESPN_BASE_URL, REQUEST_TIMEOUT, Team
from .sessions import ThreadLocalSession


class ESPNClient:
    """Thin wrapper over the ESPN team endpoints. HTTP errors are raised to the caller."""

    def __init__(self, session: Optional[requests.Session] = None):
        self._sessions = ThreadLocalSession(session)

    @property
    def session(self) -> requests.Session:
        return self._sessions.get()

    def _get(self, path: str) -> dict:
        response = self.session.get(f"{ESPN_BASE_URL}/{path}", timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.json()

    def get_team(self, team: Union[Team, tuple]) -> dict:
        """Team profile: record items and standingSummary live under 'team'"""
        sport, team_id = _sport_and_id(team)
        return self._get(f"{sport}/teams/{team_id}").get("team") or {}

    def get_schedule(self, team: Union[Team, tuple]) -> list:
        """Season schedule events for a team, in schedule order"""
        sport, team_id = _sport_and_id(team)
        return self._get(f"{sport}/teams/{team_id}/schedule").get("events") or []


def _sport_and_id(team: Union[Team, tuple]) -> tuple:
    if isinstance(team, Team):
        return team.sport, team.team_id
    sport, team_id = team
    return sport, team_id
