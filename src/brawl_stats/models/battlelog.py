from __future__ import annotations

from datetime import datetime

from pydantic import Field

from brawl_stats.core.tag import Tag
from brawl_stats.core.time import parse_battle_time
from brawl_stats.http.routes import Route
from brawl_stats.models.base import ApiModel, TagFetchable
from brawl_stats.models.enums import BattleOutcome


class BattleBrawler(ApiModel):
    id: int = 0
    name: str = ""
    power: int = 1
    trophies: int = 0


class BattlePlayer(ApiModel):
    tag: str = ""
    name: str = ""
    brawler: BattleBrawler = Field(default_factory=BattleBrawler)


class BattleEvent(ApiModel):
    id: int = 0
    mode: str = ""
    map: str | None = None


class BattleResultInfo(ApiModel):
    """
    The `battle` object of a battle log entry.

    Team modes fill `teams`; showdown fills `players` and `rank` instead of
    `result`.
    """

    mode: str = ""
    battle_type: str | None = Field(default=None, alias="type")
    duration: int = 0
    trophy_change: int = 0
    rank: int | None = None
    result: BattleOutcome | None = None
    star_player: BattlePlayer | None = None
    teams: list[list[BattlePlayer]] | None = None
    players: list[BattlePlayer] | None = None


class Battle(ApiModel):
    battle_time: str = ""
    event: BattleEvent = Field(default_factory=BattleEvent)
    result: BattleResultInfo = Field(default_factory=BattleResultInfo, alias="battle")

    @property
    def battle_datetime(self) -> datetime | None:
        if not self.battle_time:
            return None
        return parse_battle_time(self.battle_time)


class BattleLog(TagFetchable):
    """
    Recent battles of one player.

    Endpoint: GET /v1/players/{playerTag}/battlelog

    The API does not echo the tag back; `tag` is filled in from the fetch key.
    """

    tag: str = ""
    items: list[Battle]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Battle:
        return self.items[index]

    @classmethod
    def route(cls, key: Tag) -> Route:
        return Route.player_battlelog(key)

    def with_key(self, key: Tag) -> BattleLog:
        return self.model_copy(update={"tag": key.canonical})
