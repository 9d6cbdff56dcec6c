from __future__ import annotations

import logging

import typer

from brawl_stats.cli.brawlers import app as brawlers_app
from brawl_stats.cli.clubs import app as clubs_app
from brawl_stats.cli.players import app as players_app
from brawl_stats.cli.rankings import app as rankings_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(players_app, name="players")
app.add_typer(clubs_app, name="clubs")
app.add_typer(brawlers_app, name="brawlers")
app.add_typer(rankings_app, name="rankings")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
