from brawl_stats.models.battlelog import (
    Battle,
    BattleBrawler,
    BattleEvent,
    BattleLog,
    BattlePlayer,
    BattleResultInfo,
)
from brawl_stats.models.brawler import Brawler, BrawlerList
from brawl_stats.models.club import Club, ClubMember, ClubMembers
from brawl_stats.models.common import Gadget, Icon, StarPower
from brawl_stats.models.enums import BattleOutcome, BrawlerId, ClubMemberRole, ClubType
from brawl_stats.models.player import Player, PlayerBrawlerStat, PlayerClub
from brawl_stats.models.rankings import (
    BrawlerLeaderboard,
    ClubLeaderboard,
    ClubRanking,
    PlayerLeaderboard,
    PlayerRanking,
    PlayerRankingClub,
)

__all__ = [
    "Battle",
    "BattleBrawler",
    "BattleEvent",
    "BattleLog",
    "BattleOutcome",
    "BattlePlayer",
    "BattleResultInfo",
    "Brawler",
    "BrawlerId",
    "BrawlerLeaderboard",
    "BrawlerList",
    "Club",
    "ClubLeaderboard",
    "ClubMember",
    "ClubMemberRole",
    "ClubMembers",
    "ClubRanking",
    "ClubType",
    "Gadget",
    "Icon",
    "Player",
    "PlayerBrawlerStat",
    "PlayerClub",
    "PlayerLeaderboard",
    "PlayerRanking",
    "PlayerRankingClub",
    "StarPower",
]
