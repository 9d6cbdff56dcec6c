from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError

from brawl_stats.http.errors import (
    ApiErrorBody,
    BrawlApiError,
    MalformedResponse,
    NotFound,
    RateLimited,
    ServerError,
    Unauthorized,
)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def decode_error_body(content: bytes) -> ApiErrorBody | None:
    """Best-effort decode of the API's error payload; None when absent or not JSON."""

    if not content:
        return None
    try:
        return ApiErrorBody.model_validate_json(content)
    except ValidationError:
        return None


def classify(
    status_code: int,
    content: bytes = b"",
    headers: Mapping[str, str] | None = None,
) -> BrawlApiError:
    """
    Map a non-2xx response to its domain error.

    The returned exception is meant to be raised by the caller. The body only
    enriches the error; a body that cannot be decoded never changes the kind.
    """
    if 200 <= status_code < 300:
        raise ValueError(f"HTTP {status_code} is a success status and has no error kind.")

    body = decode_error_body(content)
    lowered = {k.lower(): v for k, v in (headers or {}).items()}

    if status_code == 400:
        return MalformedResponse(
            "The API rejected the request as malformed (HTTP 400).",
            status_code=status_code,
            body=body,
        )
    if status_code == 403:
        return Unauthorized(
            "Access denied (HTTP 403). Check the API token and its allowed IP addresses.",
            status_code=status_code,
            body=body,
        )
    if status_code == 404:
        return NotFound("Resource not found (HTTP 404).", status_code=status_code, body=body)
    if status_code == 429:
        return RateLimited(
            "API rate limited the request (HTTP 429).",
            status_code=status_code,
            body=body,
            limit=_parse_int(lowered.get("x-ratelimit-limit")),
            remaining=_parse_int(lowered.get("x-ratelimit-remaining")),
            reset=lowered.get("x-ratelimit-reset"),
        )
    return ServerError(f"API server error (HTTP {status_code}).", status_code=status_code, body=body)
