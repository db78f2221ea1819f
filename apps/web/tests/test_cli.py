"""Tests for the terminal front end."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from common.models.user import User
from web.cli import app
from web.user_client import UserApiError

runner = CliRunner()

ALICE = User.model_validate({"id": 1, "name": "Alice", "email": "alice@example.com", "createdAt": "2024-01-01T12:00:00Z"})
TEST_USER = User.model_validate(
    {"id": 2, "name": "Test Bruker", "email": "test@example.com", "createdAt": "2024-01-03T12:00:00Z"}
)


@pytest.mark.unit
def test_lists_users() -> None:
    with patch("web.cli.UserApiClient") as client_cls:
        client_cls.return_value.get_users.return_value = [ALICE]
        client_cls.return_value.get_api_url.return_value = "http://api.test"

        result = runner.invoke(app, ["--api-url", "http://api.test"])

    assert result.exit_code == 0
    assert "Alice" in result.output
    assert client_cls.call_args.kwargs["api_url"] == "http://api.test"


@pytest.mark.unit
def test_add_test_user_flag() -> None:
    with patch("web.cli.UserApiClient") as client_cls:
        client_cls.return_value.get_users.return_value = [ALICE]
        client_cls.return_value.create_user.return_value = TEST_USER
        client_cls.return_value.get_api_url.return_value = "http://api.test"

        result = runner.invoke(app, ["--add-test-user"])

    assert result.exit_code == 0
    assert "Test Bruker" in result.output


@pytest.mark.unit
def test_load_failure_exits_non_zero() -> None:
    with patch("web.cli.UserApiClient") as client_cls:
        client_cls.return_value.get_users.side_effect = UserApiError("connection refused")
        client_cls.return_value.get_api_url.return_value = "http://api.test"

        result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Kunne ikke laste brukere: connection refused" in result.output
