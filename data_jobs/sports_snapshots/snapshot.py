"""
Snapshot timestamps and JSON file output
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import pytz

from .config import DATA_DIR, LOCAL_TIMEZONE


def format_local_time(moment: datetime) -> str:
    """Render a timezone-aware datetime as 'M/D/YYYY, h:MM:SS AM'"""
    hour = moment.hour % 12 or 12
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment:%M:%S} {moment:%p}"
    )


def timestamps(now: Optional[datetime] = None) -> dict:
    """
    Build the timestamp fields shared by every snapshot.

    Args:
        now: Moment to stamp (default: current UTC time). Naive values are
            treated as UTC.

    Returns:
        Dict with 'lastUpdated' (UTC ISO-8601) and 'lastUpdatedMT'
        (Mountain Time, US locale style)
    """
    if now is None:
        now = datetime.now(pytz.UTC)
    elif now.tzinfo is None:
        now = pytz.UTC.localize(now)

    utc_now = now.astimezone(pytz.UTC)
    mountain = utc_now.astimezone(pytz.timezone(LOCAL_TIMEZONE))

    return {
        "lastUpdated": utc_now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "lastUpdatedMT": format_local_time(mountain),
    }


def write_snapshot(filename: str, payload: dict, data_dir: Union[str, Path] = DATA_DIR) -> Path:
    """
    Write a snapshot as pretty-printed JSON, replacing any previous file.

    Args:
        filename: Output file name inside data_dir
        payload: JSON-serializable snapshot
        data_dir: Output directory, created if missing

    Returns:
        Path of the written file
    """
    save_dir = Path(data_dir)
    save_dir.mkdir(parents=True, exist_ok=True)

    output_path = save_dir / filename
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)

    return output_path
