from __future__ import annotations

from dataclasses import dataclass

from pydantic import field_validator

from brawl_stats.core.text import parse_int_key, parse_region
from brawl_stats.http.routes import Route
from brawl_stats.models.base import ApiModel, Fetchable
from brawl_stats.models.common import Icon, NameColor

# "global" or a two-letter country code.
DEFAULT_REGION = "global"
DEFAULT_LIMIT = 200


@dataclass(frozen=True)
class RankingKey:
    region: str
    limit: int
    brawler_id: int = 0


def _ranking_key(region: str, limit: int, brawler_id: int = 0) -> RankingKey:
    return RankingKey(
        region=parse_region(region),
        limit=parse_int_key(limit, "limit"),
        brawler_id=parse_int_key(brawler_id, "brawler id"),
    )


class PlayerRankingClub(ApiModel):
    name: str = ""


class PlayerRanking(ApiModel):
    tag: str
    name: str
    name_color: NameColor = 0xFFFFFF
    icon: Icon | None = None
    trophies: int = 0
    rank: int = 1
    club: PlayerRankingClub | None = None


class ClubRanking(ApiModel):
    tag: str
    name: str
    badge_id: int = 0
    trophies: int = 0
    rank: int = 1
    member_count: int = 0


class _Leaderboard(Fetchable):
    def __len__(self) -> int:
        return len(self.items)  # type: ignore[attr-defined]

    @field_validator("items", check_fields=False)
    @classmethod
    def _sort_by_rank(cls, value: list) -> list:
        return sorted(value, key=lambda entry: entry.rank)


class PlayerLeaderboard(_Leaderboard):
    """
    Endpoint: GET /v1/rankings/{region}/players?limit=
    """

    items: list[PlayerRanking]

    def __getitem__(self, index: int) -> PlayerRanking:
        return self.items[index]

    @classmethod
    def normalize_key(cls, region: str = DEFAULT_REGION, limit: int = DEFAULT_LIMIT) -> RankingKey:
        return _ranking_key(region, limit)

    @classmethod
    def route(cls, key: RankingKey) -> Route:
        return Route.player_rankings(key.region, key.limit)


class ClubLeaderboard(_Leaderboard):
    """
    Endpoint: GET /v1/rankings/{region}/clubs?limit=
    """

    items: list[ClubRanking]

    def __getitem__(self, index: int) -> ClubRanking:
        return self.items[index]

    @classmethod
    def normalize_key(cls, region: str = DEFAULT_REGION, limit: int = DEFAULT_LIMIT) -> RankingKey:
        return _ranking_key(region, limit)

    @classmethod
    def route(cls, key: RankingKey) -> Route:
        return Route.club_rankings(key.region, key.limit)


class BrawlerLeaderboard(_Leaderboard):
    """
    Top players for a single brawler.

    Endpoint: GET /v1/rankings/{region}/brawlers/{brawlerId}?limit=
    """

    items: list[PlayerRanking]

    def __getitem__(self, index: int) -> PlayerRanking:
        return self.items[index]

    @classmethod
    def normalize_key(
        cls,
        region: str,
        brawler_id: int,
        limit: int = DEFAULT_LIMIT,
    ) -> RankingKey:
        return _ranking_key(region, limit, brawler_id)

    @classmethod
    def route(cls, key: RankingKey) -> Route:
        return Route.brawler_rankings(key.region, key.brawler_id, key.limit)
