"""Tests for the ``flask search`` command group."""

from __future__ import annotations

import json
import logging

from tests.helpers.http import TEST_TOKEN


def test_dataset_stats(app) -> None:
    result = app.test_cli_runner().invoke(args=["search", "dataset-stats"])
    assert result.exit_code == 0
    assert "users=35" in result.output


def test_find_users_prints_page(app, live_url) -> None:
    result = app.test_cli_runner().invoke(
        args=["search", "find-users", "--url", live_url, "--query", "cillum cupidatat sit", "--limit", "5"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["users"][0]["Name"] == "Glenn Jordan"
    assert payload["next_page"] is False


def test_find_users_reports_classified_error(app, live_url) -> None:
    result = app.test_cli_runner().invoke(
        args=["search", "find-users", "--url", live_url, "--token", "No-Token", "--limit", "5"]
    )
    assert result.exit_code == 1
    assert "[access_token] Bad AccessToken" in result.output


def test_find_users_rejects_bad_order_by(app, live_url) -> None:
    result = app.test_cli_runner().invoke(
        args=["search", "find-users", "--url", live_url, "--token", TEST_TOKEN, "--order-by", "2"]
    )
    assert result.exit_code == 2


def test_verbose_raises_client_log_level(app) -> None:
    client_logger = logging.getLogger("usersearch.client")
    try:
        result = app.test_cli_runner().invoke(args=["search", "--verbose", "dataset-stats"])
        assert result.exit_code == 0
        assert client_logger.level == logging.DEBUG
    finally:
        client_logger.setLevel(logging.NOTSET)
