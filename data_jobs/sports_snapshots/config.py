"""
Configuration and team metadata for the odds and standings snapshots
"""

import os
from pathlib import Path
from typing import NamedTuple, Optional

# API Configuration
ODDS_BASE_URL = "https://api.the-odds-api.com/v4"
ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"
DEFAULT_REGION = "us"
DEFAULT_MARKETS = "h2h"
DEFAULT_ODDS_FORMAT = "american"
REQUEST_TIMEOUT = 30

API_KEY_ENV = "ODDS_API_KEY"

# Sport keys queried against The Odds API, in output order
ODDS_SPORTS = [
    "icehockey_nhl",           # NHL
    "basketball_nba",          # NBA
    "americanfootball_nfl",    # NFL
    "americanfootball_ncaaf",  # College Football
]


class Team(NamedTuple):
    name: str
    sport: str  # ESPN "<sport>/<league>" path segment
    team_id: int
    abbreviation: str


TEAMS = (
    Team("Colorado Avalanche", "hockey/nhl", 17, "COL"),
    Team("Denver Nuggets", "basketball/nba", 7, "DEN"),
    Team("Denver Broncos", "football/nfl", 7, "DEN"),
    Team("Colorado Buffaloes", "football/college-football", 38, "COLO"),
)

UPCOMING_GAMES_LIMIT = 3

# Output
DATA_DIR = Path(__file__).resolve().parents[2] / "data"
ODDS_FILE = "odds.json"
STANDINGS_FILE = "standings.json"

LOCAL_TIMEZONE = "America/Denver"


def get_api_key(api_key: Optional[str] = None) -> str:
    """Resolve the Odds API key: explicit argument, then environment"""
    return api_key or os.environ.get(API_KEY_ENV, "")
