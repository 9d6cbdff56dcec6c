from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ApiErrorBody(BaseModel):
    """Error payload the API sends alongside non-2xx responses."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    reason: str = ""
    message: str | None = None
    error_type: str | None = Field(default=None, alias="type")
    detail: dict[str, Any] | None = None


class BrawlApiError(RuntimeError):
    """Base exception for every classified fetch failure."""


class InvalidTag(BrawlApiError):
    """Caller-supplied key (tag, brawler id, region) failed validation; no request was made."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(f"Invalid key {value!r}: {reason}")
        self.value = value
        self.reason = reason


class TransportFailure(BrawlApiError):
    """The service could not be reached (DNS, connection reset, timeout, ...)."""


class ApiStatusError(BrawlApiError):
    """The service answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: ApiErrorBody | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        message = super().__str__()
        if self.body is not None and self.body.reason:
            return f"{message} (reason={self.body.reason})"
        return message


class Unauthorized(ApiStatusError):
    """HTTP 403: the token is missing, invalid, or not allowed from this IP."""


class NotFound(ApiStatusError):
    """HTTP 404: no entity exists for the given key."""


class RateLimited(ApiStatusError):
    """HTTP 429: the token exceeded its request allowance."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 429,
        body: ApiErrorBody | None = None,
        limit: int | None = None,
        remaining: int | None = None,
        reset: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        self.limit = limit
        self.remaining = remaining
        self.reset = reset


class ServerError(ApiStatusError):
    """Any other non-2xx status, typically 500 or 503."""


class MalformedResponse(BrawlApiError):
    """The request or the response body did not match the expected schema."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: ApiErrorBody | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
