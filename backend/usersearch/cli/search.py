"""Flask CLI commands for querying a search server and inspecting the dataset."""

from __future__ import annotations

import json
import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from usersearch.client import SearchClient, SearchClientError, SearchRequest
from usersearch.schemas import UserSchema
from usersearch.services import load_users
from usersearch.services._shared.errors import DatasetError

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Raise logging verbosity for client modules when requested."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("usersearch.client").setLevel(level)
    LOGGER.setLevel(level)


@click.group("search")
@click.option("--verbose", is_flag=True, help="Enable verbose client logging.")
def search_cli(verbose: bool) -> None:
    """Query a user search server."""
    _configure_logging(verbose)


@search_cli.command("find-users")
@click.option("--url", required=True, help="Absolute URL of the search endpoint.")
@click.option("--token", default=None, help="Access token (defaults to SEARCH_ACCESS_TOKEN).")
@click.option("--query", default="", help="Substring matched against name and about.")
@click.option("--limit", type=int, default=25, show_default=True)
@click.option("--offset", type=int, default=0, show_default=True)
@click.option("--order-field", default="", help="id, age or name.")
@click.option("--order-by", type=click.IntRange(-1, 1), default=0, show_default=True)
@with_appcontext
def find_users_command(
    url: str,
    token: str | None,
    query: str,
    limit: int,
    offset: int,
    order_field: str,
    order_by: int,
) -> None:
    """Print one page of users as JSON."""
    client = SearchClient.from_config(current_app.config, url)
    if token is not None:
        client.access_token = token
    request = SearchRequest(
        query=query,
        limit=limit,
        offset=offset,
        order_field=order_field,
        order_by=order_by,
    )
    try:
        page = client.find_users(request)
    except SearchClientError as exc:
        raise click.ClickException(f"[{exc.kind.value}] {exc}") from exc
    payload = {"users": UserSchema(many=True).dump(page.users), "next_page": page.next_page}
    click.echo(json.dumps(payload, indent=2))


@search_cli.command("dataset-stats")
@with_appcontext
def dataset_stats_command() -> None:
    """Report how many users the configured dataset holds."""
    path = current_app.config["DATASET_PATH"]
    try:
        users = load_users(path)
    except DatasetError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Dataset: {path}")
    click.echo(f"  users={len(users)}")
