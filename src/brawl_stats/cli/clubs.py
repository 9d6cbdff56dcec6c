from __future__ import annotations

import typer

from brawl_stats.cli.common import client_scope, echo_model
from brawl_stats.models.club import Club, ClubMembers

app = typer.Typer(help="Clubs and their members.")


@app.command("get")
def get_club_cmd(
    tag: str = typer.Argument(..., help="Club tag, with or without the leading '#'."),
) -> None:
    """Fetch a club."""

    with client_scope() as client:
        club = Club.fetch(client, tag)

    echo_model(club)


@app.command("members")
def get_club_members_cmd(
    tag: str = typer.Argument(..., help="Club tag, with or without the leading '#'."),
) -> None:
    """Fetch the member list of a club."""

    with client_scope() as client:
        members = ClubMembers.fetch(client, tag)

    echo_model(members)
