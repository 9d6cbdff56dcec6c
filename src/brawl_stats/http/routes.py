from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from brawl_stats.core.tag import Tag


def _segment(value: str | int) -> str:
    return quote(str(value), safe="")


@dataclass(frozen=True)
class Route:
    """
    One upstream endpoint: path segments relative to the API base URL plus query.

    Segments are stored already percent-encoded. Tags contribute their
    `url_segment`, so a '#' is sent as '%23' instead of being read as a URL
    fragment; every other value goes through `_segment`.
    """

    segments: tuple[str, ...]
    query: tuple[tuple[str, str], ...] = ()

    @property
    def path(self) -> str:
        return "/".join(self.segments)

    @property
    def params(self) -> dict[str, Any] | None:
        return dict(self.query) or None

    # -----------------------------
    # Players
    # -----------------------------

    @classmethod
    def player(cls, tag: Tag) -> Route:
        return cls(("players", tag.url_segment))

    @classmethod
    def player_battlelog(cls, tag: Tag) -> Route:
        return cls(("players", tag.url_segment, "battlelog"))

    # -----------------------------
    # Clubs
    # -----------------------------

    @classmethod
    def club(cls, tag: Tag) -> Route:
        return cls(("clubs", tag.url_segment))

    @classmethod
    def club_members(cls, tag: Tag) -> Route:
        return cls(("clubs", tag.url_segment, "members"))

    # -----------------------------
    # Brawlers
    # -----------------------------

    @classmethod
    def brawlers(cls) -> Route:
        return cls(("brawlers",))

    @classmethod
    def brawler(cls, brawler_id: int) -> Route:
        return cls(("brawlers", _segment(brawler_id)))

    # -----------------------------
    # Rankings
    # -----------------------------

    @classmethod
    def player_rankings(cls, region: str, limit: int) -> Route:
        return cls(("rankings", _segment(region), "players"), (("limit", str(limit)),))

    @classmethod
    def club_rankings(cls, region: str, limit: int) -> Route:
        return cls(("rankings", _segment(region), "clubs"), (("limit", str(limit)),))

    @classmethod
    def brawler_rankings(cls, region: str, brawler_id: int, limit: int) -> Route:
        return cls(
            ("rankings", _segment(region), "brawlers", _segment(brawler_id)),
            (("limit", str(limit)),),
        )
