"""
Sports Snapshots - odds and standings JSON snapshots
Odds from The Odds API, team and opponent records from ESPN
"""

from .config import ODDS_SPORTS, TEAMS, Team
from .client import OddsAPIClient, fetch_all_odds
from .espn import ESPNClient
from .standings import fetch_standings_snapshot, format_record
from .snapshot import write_snapshot

__all__ = [
    "OddsAPIClient",
    "ESPNClient",
    "ODDS_SPORTS",
    "TEAMS",
    "Team",
    "fetch_all_odds",
    "fetch_standings_snapshot",
    "format_record",
    "write_snapshot",
]
