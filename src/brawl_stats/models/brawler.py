from __future__ import annotations

from typing import Any, Self

from pydantic import Field

from brawl_stats.core.text import parse_int_key
from brawl_stats.http.client import AsyncBrawlClient, BrawlClient
from brawl_stats.http.routes import Route
from brawl_stats.models.base import Fetchable, Refetchable
from brawl_stats.models.common import Gadget, StarPower


def _brawler_id(source: Any) -> int:
    # Accepts a plain id, a BrawlerId, or anything with an `id` attribute.
    return parse_int_key(getattr(source, "id", source), "brawler id")


class Brawler(Refetchable):
    """
    Endpoint: GET /v1/brawlers/{brawlerId}
    """

    id: int
    name: str
    star_powers: list[StarPower] = Field(default_factory=list)
    gadgets: list[Gadget] = Field(default_factory=list)

    @classmethod
    def normalize_key(cls, brawler_id: int) -> int:
        return parse_int_key(brawler_id, "brawler id")

    @classmethod
    def route(cls, key: int) -> Route:
        return Route.brawler(key)

    def fetch_key(self) -> int:
        return self.id

    @classmethod
    def fetch_from(cls, client: BrawlClient, source: Any) -> Self:
        """Fetch from a player brawler stat, a battle brawler or a BrawlerId."""
        return cls.fetch(client, _brawler_id(source))

    @classmethod
    async def afetch_from(cls, client: AsyncBrawlClient, source: Any) -> Self:
        return await cls.afetch(client, _brawler_id(source))


class BrawlerList(Fetchable):
    """
    Every brawler in the game.

    Endpoint: GET /v1/brawlers
    """

    items: list[Brawler]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Brawler:
        return self.items[index]

    @classmethod
    def normalize_key(cls) -> None:
        return None

    @classmethod
    def route(cls, key: None) -> Route:
        return Route.brawlers()
