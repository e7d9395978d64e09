from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from transavia_crawler import cli as cli_mod
from transavia_crawler.cli import cli
from transavia_crawler.mailer import MailerError
from transavia_crawler.report import Report

BASE_ARGS = ["crawl", "-o", "ory", "-d", "lis", "-s", "20240601", "-e", "me@example.com"]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("TRANSAVIA_API_KEY", "key")


@pytest.mark.parametrize("missing", ["-o", "-d", "-s", "-e"])
@patch("requests.get")
def test_missing_required_argument_exits_1(mock_get, missing, runner, api_key):
    args = list(BASE_ARGS)
    idx = args.index(missing)
    del args[idx:idx + 2]

    result = runner.invoke(cli, args)

    assert result.exit_code == 1
    assert "Usage:" in result.output
    mock_get.assert_not_called()


@patch("requests.get")
def test_missing_api_key_exits_1(mock_get, runner):
    result = runner.invoke(cli, BASE_ARGS)
    assert result.exit_code == 1
    mock_get.assert_not_called()


@pytest.mark.parametrize(
    "extra", [["-s", "2024-06-01"], ["-h", "17-9"], ["-p", "0"], ["-p", "abc"], ["--adults=-1"]]
)
@patch("requests.get")
def test_bad_values_are_usage_errors(mock_get, extra, runner, api_key):
    result = runner.invoke(cli, BASE_ARGS + extra)
    assert result.exit_code == 2
    mock_get.assert_not_called()


def test_builds_request_and_crawls(runner, api_key):
    with patch.object(cli_mod, "crawl_and_mail") as mock_crawl:
        result = runner.invoke(
            cli,
            BASE_ARGS + ["-p", "200", "-h", "9-17", "-a", "1", "-c", "2", "-e", "you@example.com"],
        )

    assert result.exit_code == 0, result.output
    request, settings = mock_crawl.call_args.args
    assert request.origin == "ORY"
    assert request.destination == "LIS"
    assert request.start_date == date(2024, 6, 1)
    assert request.max_price == Decimal("200")
    assert request.hour_range == (9, 17)
    assert (request.adults, request.children) == (1, 2)
    assert request.recipients == ("me@example.com", "you@example.com")
    assert settings.transavia_api_key == "key"


def test_defaults(runner, api_key):
    with patch.object(cli_mod, "crawl_and_mail") as mock_crawl:
        result = runner.invoke(cli, BASE_ARGS)

    assert result.exit_code == 0, result.output
    request = mock_crawl.call_args.args[0]
    assert request.max_price == Decimal("1000")
    assert request.hour_range == (0, 24)
    assert (request.adults, request.children) == (2, 0)


def test_mail_failure_exits_3(runner, api_key):
    with patch.object(cli_mod, "crawl_and_mail", side_effect=MailerError("down")):
        result = runner.invoke(cli, BASE_ARGS)
    assert result.exit_code == 3


def test_dry_run_prints_report(runner, api_key):
    with patch.object(cli_mod, "run_search") as mock_search, patch.object(
        cli_mod, "crawl_and_mail"
    ) as mock_crawl:
        mock_search.side_effect = lambda request, fetcher: Report(request)
        result = runner.invoke(cli, BASE_ARGS + ["--dry-run"])

    assert result.exit_code == 0, result.output
    assert "No offers found" in result.output
    mock_crawl.assert_not_called()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.0.1" in result.output
