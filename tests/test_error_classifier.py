from __future__ import annotations

import json

import pytest

from brawl_stats.http.classify import classify
from brawl_stats.http.errors import (
    ApiStatusError,
    BrawlApiError,
    MalformedResponse,
    NotFound,
    RateLimited,
    ServerError,
    Unauthorized,
)


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (400, MalformedResponse),
        (403, Unauthorized),
        (404, NotFound),
        (429, RateLimited),
        (500, ServerError),
        (503, ServerError),
        (401, ServerError),
        (418, ServerError),
        (502, ServerError),
    ],
)
def test_classify_maps_status_to_error_kind(status: int, expected: type[BrawlApiError]) -> None:
    err = classify(status, b"")

    assert type(err) is expected
    assert err.status_code == status  # type: ignore[attr-defined]


def test_classify_decodes_api_error_body() -> None:
    body = json.dumps(
        {
            "reason": "accessDenied",
            "message": "Invalid authorization",
            "type": "client",
            "unknownField": 1,
        }
    ).encode()

    err = classify(403, body)

    assert isinstance(err, Unauthorized)
    assert isinstance(err, ApiStatusError)
    assert err.body is not None
    assert err.body.reason == "accessDenied"
    assert err.body.message == "Invalid authorization"
    assert err.body.error_type == "client"
    assert "accessDenied" in str(err)


def test_classify_ignores_undecodable_body() -> None:
    err = classify(503, b"<html>Service Unavailable</html>")

    assert isinstance(err, ServerError)
    assert err.status_code == 503
    assert err.body is None


def test_classify_rate_limit_headers() -> None:
    err = classify(
        429,
        b'{"reason": "requestThrottled"}',
        {"X-RateLimit-Limit": "40", "X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "12"},
    )

    assert isinstance(err, RateLimited)
    assert err.limit == 40
    assert err.remaining == 0
    assert err.reset == "12"
    assert err.body is not None and err.body.reason == "requestThrottled"


def test_classify_rate_limit_without_headers() -> None:
    err = classify(429)

    assert isinstance(err, RateLimited)
    assert err.limit is None
    assert err.remaining is None
    assert err.reset is None


def test_classify_rejects_success_status() -> None:
    with pytest.raises(ValueError):
        classify(200, b"{}")
