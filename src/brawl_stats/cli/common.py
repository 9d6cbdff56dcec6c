from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from pydantic import BaseModel

from brawl_stats.core.config import settings
from brawl_stats.http.client import BrawlClient
from brawl_stats.http.errors import BrawlApiError


def make_client() -> BrawlClient:
    return BrawlClient.from_settings(settings)


@contextmanager
def client_scope() -> Iterator[BrawlClient]:
    """
    Context-managed API client for CLI commands.
    Ensures the client is closed and turns domain errors into exit code 1.
    """
    try:
        client = make_client()
    except RuntimeError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e

    try:
        yield client
    except BrawlApiError as e:
        typer.echo(f"{type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        client.close()


def echo_model(model: BaseModel) -> None:
    typer.echo(model.model_dump_json(indent=2, by_alias=True))
