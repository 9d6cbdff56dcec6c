from __future__ import annotations

import typer

from brawl_stats.cli.common import client_scope, echo_model
from brawl_stats.models.rankings import (
    DEFAULT_LIMIT,
    DEFAULT_REGION,
    BrawlerLeaderboard,
    ClubLeaderboard,
    PlayerLeaderboard,
)

app = typer.Typer(help="Leaderboards, globally or per country.")

_REGION_HELP = "'global' or a two-letter country code (e.g. US)."


@app.command("players")
def player_rankings_cmd(
    region: str = typer.Argument(DEFAULT_REGION, help=_REGION_HELP),
    limit: int = typer.Option(DEFAULT_LIMIT, "--limit", min=1, help="Max entries."),
) -> None:
    """Top players by trophies."""

    with client_scope() as client:
        board = PlayerLeaderboard.fetch(client, region, limit)

    echo_model(board)


@app.command("clubs")
def club_rankings_cmd(
    region: str = typer.Argument(DEFAULT_REGION, help=_REGION_HELP),
    limit: int = typer.Option(DEFAULT_LIMIT, "--limit", min=1, help="Max entries."),
) -> None:
    """Top clubs by trophies."""

    with client_scope() as client:
        board = ClubLeaderboard.fetch(client, region, limit)

    echo_model(board)


@app.command("brawlers")
def brawler_rankings_cmd(
    region: str = typer.Argument(..., help=_REGION_HELP),
    brawler_id: int = typer.Argument(..., help="Brawler id (e.g. 16000000 for Shelly)."),
    limit: int = typer.Option(DEFAULT_LIMIT, "--limit", min=1, help="Max entries."),
) -> None:
    """Top players for one brawler."""

    with client_scope() as client:
        board = BrawlerLeaderboard.fetch(client, region, brawler_id, limit)

    echo_model(board)
