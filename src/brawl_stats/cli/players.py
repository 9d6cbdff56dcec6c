from __future__ import annotations

import typer

from brawl_stats.cli.common import client_scope, echo_model
from brawl_stats.models.battlelog import BattleLog
from brawl_stats.models.player import Player

app = typer.Typer(help="Player profiles and battle logs.")


@app.command("get")
def get_player_cmd(
    tag: str = typer.Argument(..., help="Player tag, with or without the leading '#'."),
) -> None:
    """Fetch a player profile."""

    with client_scope() as client:
        player = Player.fetch(client, tag)

    echo_model(player)


@app.command("battlelog")
def get_battlelog_cmd(
    tag: str = typer.Argument(..., help="Player tag, with or without the leading '#'."),
) -> None:
    """Fetch a player's recent battles."""

    with client_scope() as client:
        battle_log = BattleLog.fetch(client, tag)

    echo_model(battle_log)
