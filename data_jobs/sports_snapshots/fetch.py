#!/usr/bin/env python3
"""
Sports Snapshot Fetcher - odds from The Odds API, standings from ESPN

Usage:
    python -m data_jobs.sports_snapshots.fetch [odds|standings] [--data-dir DIR]

Without a mode both snapshots are refreshed, odds first.

Environment Variables:
    ODDS_API_KEY: API key for The Odds API
"""

import argparse
import sys
from typing import Optional

from data_jobs.sports_snapshots.client import fetch_all_odds
from data_jobs.sports_snapshots.config import DATA_DIR
from data_jobs.sports_snapshots.standings import fetch_standings_snapshot

MODE_ODDS = "odds"
MODE_STANDINGS = "standings"
MODE_ALL = "all"


def run(mode: str = MODE_ALL, data_dir=DATA_DIR) -> dict:
    """
    Run the selected workflow(s).

    Returns:
        Dict of the snapshots written, keyed by workflow
    """
    snapshots = {}

    if mode != MODE_STANDINGS:
        snapshots[MODE_ODDS] = fetch_all_odds(data_dir=data_dir)

    if mode != MODE_ODDS:
        if snapshots:
            print()
        snapshots[MODE_STANDINGS] = fetch_standings_snapshot(data_dir=data_dir)

    return snapshots


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fetch betting odds and team standings snapshots"
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default=MODE_ALL,
        help="'odds', 'standings', or anything else for both (default: both)",
    )
    parser.add_argument(
        "--data-dir",
        default=DATA_DIR,
        help=f"Directory for snapshot files (default: {DATA_DIR})",
    )

    args = parser.parse_args(argv)

    try:
        run(args.mode, args.data_dir)
    except Exception as e:
        print(f"Error: {e}")
        return 1

    print("\n✓ Complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
