__version__ = "0.1.0"

from brawl_stats.core.config import Settings, settings  # noqa: E402
from brawl_stats.core.tag import Tag  # noqa: E402
from brawl_stats.http.client import AsyncBrawlClient, BrawlClient  # noqa: E402
from brawl_stats.http.errors import (  # noqa: E402
    ApiStatusError,
    BrawlApiError,
    InvalidTag,
    MalformedResponse,
    NotFound,
    RateLimited,
    ServerError,
    TransportFailure,
    Unauthorized,
)

__all__ = [
    "ApiStatusError",
    "AsyncBrawlClient",
    "BrawlApiError",
    "BrawlClient",
    "InvalidTag",
    "MalformedResponse",
    "NotFound",
    "RateLimited",
    "ServerError",
    "Settings",
    "Tag",
    "TransportFailure",
    "Unauthorized",
    "__version__",
    "settings",
]
