from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from brawl_stats.core.tag import Tag
from brawl_stats.http.classify import classify
from brawl_stats.http.client import AsyncBrawlClient, BrawlClient, RawResponse
from brawl_stats.http.errors import MalformedResponse
from brawl_stats.http.routes import Route

logger = logging.getLogger(__name__)


class ApiModel(BaseModel):
    """Immutable model mirroring an upstream JSON object (camelCase keys, extras ignored)."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Fetchable(ApiModel):
    """
    An entity that can be retrieved from the API.

    Subclasses describe only their key and endpoint:

    - `normalize_key(...)` validates caller input into the entity's key
      (raising before any request is made).
    - `route(key)` builds the endpoint for that key.

    The fetch algorithm itself lives here once and is shared by the blocking
    (`fetch`) and asyncio (`afetch`) entry points; they differ only in how
    the request is executed.
    """

    @classmethod
    def normalize_key(cls, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError

    @classmethod
    def route(cls, key: Any) -> Route:
        raise NotImplementedError

    @classmethod
    def from_response(cls, response: RawResponse) -> Self:
        """
        Turn a raw response into an entity.
        Non-2xx goes through the error classifier; the body is never decoded
        as the entity in that case.
        """
        if not response.ok:
            err = classify(response.status_code, response.content, response.headers)
            logger.debug("%s fetch failed: %s", cls.__name__, err)
            raise err

        try:
            return cls.model_validate_json(response.content)
        except ValidationError as e:
            raise MalformedResponse(
                f"{cls.__name__} response did not match the expected schema "
                f"({e.error_count()} error(s)).",
                status_code=response.status_code,
            ) from e

    def with_key(self, key: Any) -> Self:
        """Hook for entities that remember the key they were fetched with."""
        return self

    @classmethod
    def fetch(cls, client: BrawlClient, *args: Any, **kwargs: Any) -> Self:
        key = cls.normalize_key(*args, **kwargs)
        response = client.execute("GET", cls.route(key))
        return cls.from_response(response).with_key(key)

    @classmethod
    async def afetch(cls, client: AsyncBrawlClient, *args: Any, **kwargs: Any) -> Self:
        key = cls.normalize_key(*args, **kwargs)
        response = await client.execute("GET", cls.route(key))
        return cls.from_response(response).with_key(key)


class Refetchable(Fetchable):
    """A fetchable entity that carries its own key and can fetch a fresh copy of itself."""

    def fetch_key(self) -> Any:
        raise NotImplementedError

    def refetch(self, client: BrawlClient) -> Self:
        return type(self).fetch(client, self.fetch_key())

    async def arefetch(self, client: AsyncBrawlClient) -> Self:
        return await type(self).afetch(client, self.fetch_key())


class TagFetchable(Refetchable):
    """Entities keyed by a player or club tag."""

    @classmethod
    def normalize_key(cls, tag: str | Tag) -> Tag:
        return Tag.parse(tag)

    def fetch_key(self) -> str:
        return self.tag  # type: ignore[attr-defined]

    @classmethod
    def fetch_from(cls, client: BrawlClient, source: Any) -> Self:
        """Fetch using the `tag` of any related object (club member, ranking entry, ...)."""
        return cls.fetch(client, source.tag)

    @classmethod
    async def afetch_from(cls, client: AsyncBrawlClient, source: Any) -> Self:
        return await cls.afetch(client, source.tag)
