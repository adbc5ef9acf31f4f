"""
Odds API Client with concurrent per-sport fetching and quota tracking
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

import requests

from .config import (
    ODDS_BASE_URL,
    DEFAULT_REGION,
    DEFAULT_MARKETS,
    DEFAULT_ODDS_FORMAT,
    REQUEST_TIMEOUT,
    ODDS_SPORTS,
    API_KEY_ENV,
    DATA_DIR,
    ODDS_FILE,
    get_api_key,
)
from .sessions import ThreadLocalSession
from .snapshot import timestamps, write_snapshot


class OddsAPIClient:
    """
    Client for The Odds API.
    A failed sport is reported and skipped, never raised.
    """

    def __init__(self, api_key: Optional[str] = None, session: Optional[requests.Session] = None):
        self.api_key = get_api_key(api_key)
        if not self.api_key:
            print(f"WARNING: {API_KEY_ENV} is not set; odds requests will be rejected.")

        self._sessions = ThreadLocalSession(session)

        # Track API quota from response headers
        self._quota_lock = threading.Lock()
        self.requests_remaining: Optional[int] = None
        self.requests_used: Optional[int] = None

    @property
    def session(self) -> requests.Session:
        return self._sessions.get()

    def _track_quota(self, response: requests.Response):
        remaining = response.headers.get("x-requests-remaining")
        used = response.headers.get("x-requests-used")
        with self._quota_lock:
            if remaining is not None:
                self.requests_remaining = int(remaining)
            if used is not None:
                self.requests_used = int(used)

    def fetch_odds(
        self,
        sport: str,
        regions: str = DEFAULT_REGION,
        markets: str = DEFAULT_MARKETS,
        odds_format: str = DEFAULT_ODDS_FORMAT,
    ) -> Optional[list]:
        """
        Fetch odds for a specific sport.

        Args:
            sport: Odds API sport key (e.g. 'icehockey_nhl')
            regions: Comma-separated regions (default: 'us')
            markets: Comma-separated markets (default: 'h2h')
            odds_format: Odds format (default: 'american')

        Returns:
            List of game data with odds, or None if the request failed
        """
        url = f"{ODDS_BASE_URL}/sports/{sport}/odds/"
        params = {
            "apiKey": self.api_key,
            "regions": regions,
            "markets": markets,
            "oddsFormat": odds_format,
        }

        try:
            response = self.session.get(url, params=params, timeout=REQUEST_TIMEOUT)
            if not response.ok:
                print(f"✗ Error fetching {sport}: {response.status_code} {response.reason}")
                return None

            games = response.json()
            if not isinstance(games, list):
                print(f"✗ Error fetching {sport}: expected a list of games, got {type(games).__name__}")
                return None

            self._track_quota(response)
            print(f"✓ Fetched {len(games)} games for {sport}")
        except Exception as e:
            print(f"✗ Error fetching {sport}: {e}")
            return None

        return games

    def fetch_all_sports(self, sports: Optional[list] = None) -> list:
        """
        Fetch odds for every sport at once.

        Returns:
            List of {'sport', 'games'} dicts in configured order, failed
            sports omitted
        """
        sports = list(ODDS_SPORTS if sports is None else sports)
        if not sports:
            return []

        with ThreadPoolExecutor(max_workers=len(sports)) as pool:
            results = list(pool.map(self.fetch_odds, sports))

        return [
            {"sport": sport, "games": games}
            for sport, games in zip(sports, results)
            if games is not None
        ]


def fetch_all_odds(
    client: Optional[OddsAPIClient] = None,
    data_dir: Union[str, Path] = DATA_DIR,
    sports: Optional[list] = None,
) -> dict:
    """
    Fetch odds for all configured sports and save the odds snapshot.

    Returns:
        The snapshot that was written
    """
    client = client or OddsAPIClient()
    sports = list(ODDS_SPORTS if sports is None else sports)

    print("Fetching odds from The Odds API...")
    print(f"Time: {timestamps()['lastUpdatedMT']} MT")

    results = client.fetch_all_sports(sports)
    odds_data = {**timestamps(), "sports": results}

    output_path = write_snapshot(ODDS_FILE, odds_data, data_dir)
    print(f"\n✓ Saved odds to {output_path}")
    print(f"Total API calls used: {len(sports)}")
    if client.requests_remaining is not None:
        print(f"API Quota: {client.requests_remaining} requests remaining (used {client.requests_used})")

    return odds_data
