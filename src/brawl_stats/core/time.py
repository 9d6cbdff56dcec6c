from __future__ import annotations

from datetime import UTC, datetime

# Upstream battle timestamps look like "20200131T003432.000Z".
BATTLE_TIME_FORMAT = "%Y%m%dT%H%M%S.%fZ"


def parse_battle_time(value: str) -> datetime:
    """Parse an upstream battle timestamp into an aware UTC datetime."""

    v = value.strip()
    dt = datetime.strptime(v, BATTLE_TIME_FORMAT)
    return dt.replace(tzinfo=UTC)
