from __future__ import annotations

import typer

from brawl_stats.cli.common import client_scope, echo_model
from brawl_stats.models.brawler import Brawler, BrawlerList

app = typer.Typer(help="Brawler catalogue.")


@app.command("get")
def get_brawler_cmd(
    brawler_id: int = typer.Argument(..., help="Brawler id (e.g. 16000000 for Shelly)."),
) -> None:
    """Fetch a single brawler."""

    with client_scope() as client:
        brawler = Brawler.fetch(client, brawler_id)

    echo_model(brawler)


@app.command("list")
def list_brawlers_cmd() -> None:
    """Fetch every brawler."""

    with client_scope() as client:
        brawlers = BrawlerList.fetch(client)

    echo_model(brawlers)
