from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from brawl_stats.http.client import BrawlClient
from brawl_stats.http.errors import (
    InvalidTag,
    MalformedResponse,
    NotFound,
    RateLimited,
    ServerError,
    TransportFailure,
    Unauthorized,
)
from brawl_stats.models.battlelog import BattleLog
from brawl_stats.models.enums import BattleOutcome
from brawl_stats.models.player import Player

DATA = Path(__file__).parent / "data"


def _load(name: str) -> dict[str, Any]:
    return json.loads((DATA / name).read_text(encoding="utf-8"))


def _client(handler) -> BrawlClient:
    return BrawlClient(auth_token="test", transport=httpx.MockTransport(handler))


def test_player_fetch_decodes_full_payload() -> None:
    payload = _load("player.json")

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.raw_path == b"/v1/players/%232PP"
        return httpx.Response(200, json=payload)

    player = Player.fetch(_client(handler), "2pp")

    assert player.tag == "#2PP"
    assert player.name == "Spike Enjoyer"
    assert player.name_color == 0xFF1BA5F5
    assert player.tvt_victories == 9000
    assert player.is_qualified_from_championship_challenge is True
    assert player.club is not None and player.club.tag == "#9QQ2J"
    assert [b.name for b in player.brawlers] == ["SHELLY", "SPIKE"]
    assert player.brawlers[0].star_powers[0].name == "SHELL SHOCK"

    # Every field of the input survives decoding unchanged.
    dumped = player.model_dump(by_alias=True, mode="json")
    expected = dict(payload, nameColor=0xFF1BA5F5)
    assert {k: dumped[k] for k in expected} == expected


def test_player_fetch_ignores_unknown_fields_and_defaults_missing_ones() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"tag": "#2PP", "name": "New", "club": {}, "brandNewField": [1, 2]}
        )

    player = Player.fetch(_client(handler), "#2PP")

    assert player.club is None
    assert player.exp_level == 1
    assert player.trophies == 0
    assert player.name_color == 0xFFFFFF
    assert player.brawlers == []


def test_player_fetch_not_found_skips_decoding() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, content=b"definitely not json")

    with pytest.raises(NotFound) as exc:
        Player.fetch(_client(handler), "#2PP")

    assert exc.value.status_code == 404


def test_player_fetch_empty_object_is_malformed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    with pytest.raises(MalformedResponse) as exc:
        Player.fetch(_client(handler), "#2PP")

    assert exc.value.status_code == 200


@pytest.mark.parametrize("content", [b"", b"not json", b"[]", b'{"tag": "#2PP", "name": 5}'])
def test_player_fetch_garbage_body_is_malformed(content: bytes) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=content)

    with pytest.raises(MalformedResponse):
        Player.fetch(_client(handler), "#2PP")


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (400, MalformedResponse),
        (403, Unauthorized),
        (429, RateLimited),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_player_fetch_classifies_http_errors(status: int, expected: type[Exception]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json={"reason": "whatever"})

    with pytest.raises(expected):
        Player.fetch(_client(handler), "#2PP")


def test_player_fetch_invalid_tag_issues_no_request() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_load("player.json"))

    with pytest.raises(InvalidTag):
        Player.fetch(_client(handler), "#NOT-A-TAG")
    with pytest.raises(InvalidTag):
        Player.fetch(_client(handler), "")

    assert calls == []


def test_player_fetch_connection_reset_is_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 104] Connection reset by peer", request=request)

    with pytest.raises(TransportFailure):
        Player.fetch(_client(handler), "#2PP")


def test_player_refetch_and_fetch_from() -> None:
    paths: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path)
        return httpx.Response(200, json=_load("player.json"))

    client = _client(handler)
    player = Player.fetch(client, "#2PP")

    assert player.refetch(client) == player

    log = BattleLog.model_validate(_load("battlelog.json"))
    star = log[0].result.star_player
    assert star is not None
    Player.fetch_from(client, star)

    assert paths == [
        b"/v1/players/%232PP",
        b"/v1/players/%232PP",
        b"/v1/players/%23CCCCCCCC",
    ]


def test_battlelog_fetch_remembers_tag() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.raw_path == b"/v1/players/%232PP/battlelog"
        return httpx.Response(200, json=_load("battlelog.json"))

    log = BattleLog.fetch(_client(handler), "2pp")

    assert log.tag == "#2PP"
    assert len(log) == 2

    team_battle = log[0]
    assert team_battle.event.map == "Coarse Course"
    assert team_battle.result.result is BattleOutcome.VICTORY
    assert team_battle.result.battle_type == "ranked"
    assert team_battle.result.teams is not None
    assert team_battle.result.teams[1][1].name == "пользователь"
    assert team_battle.battle_datetime is not None
    assert team_battle.battle_datetime.year == 2020

    showdown = log[1]
    assert showdown.result.result is None
    assert showdown.result.rank == 3
    assert showdown.result.players is not None


def test_battlelog_fetch_from_player() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.raw_path.endswith(b"/battlelog"):
            return httpx.Response(200, json=_load("battlelog.json"))
        return httpx.Response(200, json=_load("player.json"))

    client = _client(handler)
    player = Player.fetch(client, "#2PP")
    log = BattleLog.fetch_from(client, player)

    assert log.tag == player.tag


def test_battlelog_unknown_outcome_is_tolerated() -> None:
    payload = _load("battlelog.json")
    payload["items"][0]["battle"]["result"] = "somethingNew"

    log = BattleLog.model_validate(payload)

    assert log[0].result.result is BattleOutcome.UNKNOWN
