from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

import httpx

from brawl_stats import __version__
from brawl_stats.core.config import Settings, settings
from brawl_stats.http.errors import MalformedResponse, TransportFailure
from brawl_stats.http.routes import Route

logger = logging.getLogger(__name__)

USER_AGENT = f"brawl-stats/{__version__} (+httpx)"


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> RawResponse:
        return cls(status_code=resp.status_code, content=resp.content, headers=resp.headers)


def bearer(auth_token: str) -> str:
    if auth_token.startswith("Bearer "):
        return auth_token
    return f"Bearer {auth_token}"


@dataclass
class _ClientOptions:
    """
    Settings shared by the blocking and the asyncio client.

    Unset options fall back to the module-level `settings`. The token is kept
    out of repr() and is only ever written into the Authorization header.
    """

    auth_token: str = field(repr=False)
    base_url: str | None = None
    timeout_s: float | None = None
    connect_timeout_s: float | None = None

    def _httpx_options(self) -> dict[str, Any]:
        if not isinstance(self.auth_token, str) or not self.auth_token.strip():
            raise ValueError("auth_token must be a non-empty string.")

        base_url = self.base_url or settings.api_base_url
        timeout_s = self.timeout_s if self.timeout_s is not None else settings.timeout_s
        connect_timeout_s = (
            self.connect_timeout_s
            if self.connect_timeout_s is not None
            else settings.connect_timeout_s
        )
        return {
            "base_url": base_url.rstrip("/") + "/",
            "timeout": httpx.Timeout(timeout_s, connect=connect_timeout_s),
            "headers": {
                "Authorization": bearer(self.auth_token),
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
        }

    @classmethod
    def from_settings(cls, cfg: Settings | None = None, **kwargs: Any) -> Self:
        cfg = cfg or settings
        return cls(
            auth_token=cfg.require_api_token(),
            base_url=cfg.api_base_url,
            timeout_s=cfg.timeout_s,
            connect_timeout_s=cfg.connect_timeout_s,
            **kwargs,
        )


@dataclass
class BrawlClient(_ClientOptions):
    """
    Blocking client: every `execute` call holds the calling thread until the
    full response has arrived.

    Wraps a single httpx.Client so connections are pooled. It is safe to share
    one instance between threads.
    """

    transport: httpx.BaseTransport | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._client = httpx.Client(transport=self.transport, **self._httpx_options())

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BrawlClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def execute(self, method: str, route: Route) -> RawResponse:
        """
        Perform one request and return its status, body and headers.
        Raises TransportFailure when the service cannot be reached, and
        MalformedResponse when the body cannot be decoded (bad Content-Encoding).
        """
        logger.debug("%s %s params=%s", method, route.path, route.params)
        try:
            resp = self._client.request(method, route.path, params=route.params)
        except httpx.TransportError as e:
            logger.debug("%s %s failed: %r", method, route.path, e)
            raise TransportFailure(f"{method} {route.path} failed: {e}") from e
        except httpx.DecodingError as e:
            logger.debug("%s %s body could not be decoded: %r", method, route.path, e)
            raise MalformedResponse(
                f"{method} {route.path} returned an undecodable body: {e}"
            ) from e

        return RawResponse.from_httpx(resp)


@dataclass
class AsyncBrawlClient(_ClientOptions):
    """
    Asyncio client: `execute` suspends the calling task while waiting on the
    network instead of holding a thread.

    Cancelling the awaiting task closes the in-flight connection inside httpx;
    the CancelledError reaches the caller unchanged.
    """

    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(transport=self.transport, **self._httpx_options())

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncBrawlClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def execute(self, method: str, route: Route) -> RawResponse:
        logger.debug("%s %s params=%s", method, route.path, route.params)
        try:
            resp = await self._client.request(method, route.path, params=route.params)
        except httpx.TransportError as e:
            logger.debug("%s %s failed: %r", method, route.path, e)
            raise TransportFailure(f"{method} {route.path} failed: {e}") from e
        except httpx.DecodingError as e:
            logger.debug("%s %s body could not be decoded: %r", method, route.path, e)
            raise MalformedResponse(
                f"{method} {route.path} returned an undecodable body: {e}"
            ) from e

        return RawResponse.from_httpx(resp)
