"""
Team standings and upcoming-opponent records from the ESPN API
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from .config import TEAMS, UPCOMING_GAMES_LIMIT, DATA_DIR, STANDINGS_FILE, Team
from .espn import ESPNClient
from .snapshot import timestamps, write_snapshot


def first_record(team_json: dict) -> Optional[dict]:
    items = (team_json.get("record") or {}).get("items") or []
    return items[0] if items else None


def fetch_team_standing(client: ESPNClient, team: Team) -> Optional[dict]:
    """
    Fetch the record and standing summary for one configured team.

    Returns:
        Standing dict, or None if the profile request failed
    """
    try:
        team_json = client.get_team(team)
        standing = {
            "name": team.name,
            "abbreviation": team.abbreviation,
            "sport": team.sport,
            "id": team.team_id,
            "record": first_record(team_json),
            "standingSummary": team_json.get("standingSummary"),
        }
        print(f"✓ Fetched standings for {team.name}")
    except Exception as e:
        print(f"✗ Error fetching standings for {team.name}: {e}")
        return None

    return standing


def fetch_all_standings(client: ESPNClient, teams=TEAMS) -> list:
    """Fetch every team at once; failed teams are dropped, order is kept"""
    teams = list(teams)
    if not teams:
        return []

    with ThreadPoolExecutor(max_workers=len(teams)) as pool:
        results = list(pool.map(lambda team: fetch_team_standing(client, team), teams))

    return [standing for standing in results if standing is not None]


def _stat(stats: list, name: str):
    for stat in stats:
        if stat.get("name") == name:
            return stat.get("value")
    return None


def _count(value) -> int:
    return int(round(float(value)))


def format_record(sport: str, stats: list) -> Optional[str]:
    """
    Format a record item's stats for display.

    Football shows ties, basketball shows win percentage, every other
    sport is plain wins-losses.

    Args:
        sport: ESPN sport path (e.g. 'basketball/nba')
        stats: ESPN record stats, a list of {'name', 'value'} dicts

    Returns:
        e.g. '(7-7-1)', '(10-5, 0.667)', '(20-10)'; None without wins/losses
    """
    wins = _stat(stats, "wins")
    losses = _stat(stats, "losses")
    if wins is None or losses is None:
        return None

    league = sport.split("/")[0]
    if league == "football":
        ties = _stat(stats, "ties") or 0
        return f"({_count(wins)}-{_count(losses)}-{_count(ties)})"
    if league == "basketball":
        win_percent = _stat(stats, "winPercent")
        if win_percent is not None:
            return f"({_count(wins)}-{_count(losses)}, {float(win_percent):.3f})"
    return f"({_count(wins)}-{_count(losses)})"


def opponent_entry(sport: str, team_json: dict) -> dict:
    record_item = first_record(team_json) or {}
    record = format_record(sport, record_item.get("stats") or [])

    summary = team_json.get("standingSummary")
    if record and summary:
        record = f"{record} - {summary}"

    return {
        "sport": sport,
        "id": str(team_json.get("id", "")),
        "name": team_json.get("displayName"),
        "abbreviation": team_json.get("abbreviation"),
        "record": record,
    }


def upcoming_games(events: list, limit: int = UPCOMING_GAMES_LIMIT) -> list:
    """First `limit` events that have not started, in schedule order"""
    upcoming = []
    for event in events:
        competitions = event.get("competitions") or []
        if not competitions:
            continue
        status = competitions[0].get("status") or {}
        state = (status.get("type") or {}).get("state")
        if state == "pre":
            upcoming.append(event)
    return upcoming[:limit]


def find_opponent(event: dict, team_id) -> Optional[dict]:
    """The competitor in an event that is not `team_id`"""
    competitions = event.get("competitions") or []
    if not competitions:
        return None
    for competitor in competitions[0].get("competitors") or []:
        if str(competitor.get("id")) != str(team_id):
            return competitor
    return None


def upcoming_opponent_ids(events: list, team_id) -> list:
    """Opponent ids of the next games, in schedule order"""
    opponent_ids = []
    for event in upcoming_games(events):
        competitor = find_opponent(event, team_id)
        if competitor is not None:
            opponent_ids.append(str(competitor.get("id")))
    return opponent_ids


def fetch_opponent_standing(client: ESPNClient, sport: str, opponent_id: str) -> Optional[dict]:
    try:
        return opponent_entry(sport, client.get_team((sport, opponent_id)))
    except Exception:
        return None


def derive_opponent_standings(client: ESPNClient, teams=TEAMS) -> list:
    """
    Look up the records of each team's next opponents.

    Teams are walked one at a time so an opponent shared by several teams
    is fetched only once per run.

    Returns:
        Opponent dicts, one per (sport, opponent id), in first-seen order
    """
    opponents = {}
    looked_up = set()

    for team in teams:
        try:
            opponent_ids = upcoming_opponent_ids(client.get_schedule(team), team.team_id)
        except Exception as e:
            print(f"✗ Error fetching schedule for {team.name}: {e}")
            continue

        for opponent_id in opponent_ids:
            key = (team.sport, opponent_id)
            if key in looked_up:
                continue
            looked_up.add(key)

            opponent = fetch_opponent_standing(client, team.sport, opponent_id)
            if opponent is not None:
                opponents[key] = opponent

    return list(opponents.values())


def fetch_standings_snapshot(
    client: Optional[ESPNClient] = None,
    data_dir: Union[str, Path] = DATA_DIR,
    teams=TEAMS,
) -> dict:
    """
    Fetch team standings and upcoming opponents, then save the standings snapshot.

    Returns:
        The snapshot that was written
    """
    client = client or ESPNClient()

    print("Fetching standings from ESPN...")
    teams = list(teams)
    team_standings = fetch_all_standings(client, teams)
    opponents = derive_opponent_standings(client, teams)

    standings_data = {**timestamps(), "teams": team_standings, "opponents": opponents}

    output_path = write_snapshot(STANDINGS_FILE, standings_data, data_dir)
    print(f"\n✓ Saved {len(standings_data['teams'])} teams and "
          f"{len(standings_data['opponents'])} opponents to {output_path}")

    return standings_data
