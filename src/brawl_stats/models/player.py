from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from brawl_stats.core.tag import Tag
from brawl_stats.http.routes import Route
from brawl_stats.models.base import ApiModel, TagFetchable
from brawl_stats.models.common import Gadget, Icon, NameColor, StarPower


class PlayerClub(ApiModel):
    tag: str = ""
    name: str = ""


class PlayerBrawlerStat(ApiModel):
    """One brawler as owned by a player."""

    id: int = 0
    name: str = ""
    power: int = 1
    rank: int = 1
    trophies: int = 0
    highest_trophies: int = 0
    star_powers: list[StarPower] = Field(default_factory=list)
    gadgets: list[Gadget] = Field(default_factory=list)


class Player(TagFetchable):
    """
    A player profile.

    Endpoint: GET /v1/players/{playerTag}
    """

    tag: str
    name: str
    name_color: NameColor = 0xFFFFFF
    icon: Icon | None = None
    trophies: int = 0
    highest_trophies: int = 0
    exp_level: int = 1
    exp_points: int = 0
    power_play_points: int = 0
    highest_power_play_points: int = 0
    is_qualified_from_championship_challenge: bool = False
    tvt_victories: int = Field(default=0, alias="3vs3Victories")
    solo_victories: int = 0
    duo_victories: int = 0
    best_robo_rumble_time: int = 0
    best_time_as_big_brawler: int = 0
    club: PlayerClub | None = None
    brawlers: list[PlayerBrawlerStat] = Field(default_factory=list)

    @field_validator("club", mode="before")
    @classmethod
    def _club_empty_object_means_none(cls, value: Any) -> Any:
        # Players without a club get `"club": {}`.
        if isinstance(value, dict) and not value:
            return None
        return value

    @classmethod
    def route(cls, key: Tag) -> Route:
        return Route.player(key)
