from __future__ import annotations

import re

from brawl_stats.http.errors import InvalidTag

_hex_prefix_re = re.compile(r"^0x", re.IGNORECASE)


def parse_name_color(value: object, *, default: int = 0xFFFFFF) -> int:
    """Parse a name colour sent either as a number or as a ``"0xffxxxxxx"`` string."""

    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError("name color must be a number or hex string")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        v = value.strip()
        if not v:
            return default
        if _hex_prefix_re.match(v):
            return int(v[2:], 16)
        return int(v)
    raise ValueError(f"Unsupported name color value: {value!r}")


def parse_int_key(value: object, what: str) -> int:
    """Validate a numeric fetch key (brawler id, leaderboard limit) before any request."""
    if isinstance(value, bool):
        raise InvalidTag(value, f"{what} must be an integer")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as e:
            raise InvalidTag(value, f"{what} must be an integer") from e
    raise InvalidTag(value, f"{what} must be an integer")


def parse_region(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidTag(value, "region must be 'global' or a country code")
    return value.strip()
