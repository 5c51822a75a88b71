"""Pytest fixtures for the user search server and client.

Server tests run against the Flask test client; client tests either mock the
HTTP layer with ``responses`` or talk to a real server bound to an ephemeral
localhost port.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from flask import Flask

from usersearch import create_app
from usersearch.api import search_path
from usersearch.client import SearchClient
from usersearch.core.config import TestingConfig

from tests.helpers.http import SEARCH_PATH, TEST_TOKEN
from tests.helpers.server import serve, slow_app

ROW_TEMPLATE = """
  <row>
    <id>{id}</id>
    <first_name>{first}</first_name>
    <last_name>{last}</last_name>
    <age>{age}</age>
    <about>{about}</about>
    <gender>{gender}</gender>
  </row>"""


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Pins the access token and the bundled dataset.
    - Keeps log output quiet.
    """

    SEARCH_ACCESS_TOKEN = TEST_TOKEN
    LOG_LEVEL = "WARNING"


@pytest.fixture(scope="session")
def app() -> Flask:
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestConfig` applied.
    """
    application = create_app(TestConfig)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture()
def client(app: Flask):
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture(scope="session")
def live_url(app: Flask) -> Iterator[str]:
    """Absolute URL of the search endpoint served over real HTTP."""

    with serve(app) as base_url:
        yield f"{base_url}{search_path(app)}"


@pytest.fixture()
def search_client(live_url: str) -> SearchClient:
    """Client authorized against the live test server."""

    return SearchClient(live_url, TEST_TOKEN)


@pytest.fixture(scope="session")
def slow_url() -> Iterator[str]:
    """URL of a server that answers well after the client timeout."""

    with serve(slow_app(delay=1.5)) as base_url:
        yield f"{base_url}{SEARCH_PATH}"


@pytest.fixture()
def write_dataset(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a dataset XML file from ``(first, last, age, about, gender)`` tuples."""

    def _factory(rows: list[tuple[str, str, int, str, str]], name: str = "dataset.xml") -> Path:
        body = "".join(
            ROW_TEMPLATE.format(id=i, first=first, last=last, age=age, about=about, gender=gender)
            for i, (first, last, age, about, gender) in enumerate(rows)
        )
        path = tmp_path / name
        path.write_text(f'<?xml version="1.0" encoding="UTF-8" ?>\n<root>{body}\n</root>\n', encoding="utf-8")
        return path

    return _factory
