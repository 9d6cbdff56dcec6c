from __future__ import annotations

from datetime import UTC, datetime

import pytest

from brawl_stats.core.config import Settings
from brawl_stats.core.text import parse_name_color
from brawl_stats.core.time import parse_battle_time


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRAWL_API_TOKEN", "env-token")
    monkeypatch.setenv("BRAWL_AUTO_HASHTAG", "false")
    monkeypatch.setenv("BRAWL_TIMEOUT_S", "12.5")

    cfg = Settings(_env_file=None)

    assert cfg.require_api_token() == "env-token"
    assert cfg.auto_hashtag is False
    assert cfg.timeout_s == 12.5
    assert cfg.api_base_url == "https://api.brawlstars.com/v1"


def test_settings_hide_token_from_repr() -> None:
    cfg = Settings(_env_file=None, api_token="very-secret")
    assert "very-secret" not in repr(cfg)


def test_settings_require_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BRAWL_API_TOKEN", raising=False)
    with pytest.raises(RuntimeError, match="BRAWL_API_TOKEN"):
        Settings(_env_file=None).require_api_token()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0xffa2e3fe", 0xFFA2E3FE),
        ("0XFFFFFFFF", 0xFFFFFFFF),
        (16777215, 16777215),
        ("42", 42),
        (None, 0xFFFFFF),
    ],
)
def test_parse_name_color(value: object, expected: int) -> None:
    assert parse_name_color(value) == expected


def test_parse_name_color_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_name_color("not-a-color")


def test_parse_battle_time() -> None:
    assert parse_battle_time("20200131T003432.000Z") == datetime(2020, 1, 31, 0, 34, 32, tzinfo=UTC)
