"""CLI tests — argument parsing and the query subcommand."""

import httpx
import pytest

from disaster_sms import cli


def test_query_defaults():
    args = cli.build_parser().parse_args(["query", "roads"])
    assert args.query == "roads"
    assert args.host == "http://localhost:3000"
    assert args.dry_run is False


def test_command_required():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_query_posts_to_secret_path(monkeypatch, capsys, settings):
    calls = []
    monkeypatch.setattr(cli, "get_settings", lambda: settings)

    def fake_post(url, json, headers, timeout):
        calls.append((url, json, headers))
        return httpx.Response(200, text="Ok")

    monkeypatch.setattr(cli.httpx, "post", fake_post)

    code = cli.main(["query", "is the shelter open", "--dry-run",
                     "--host", "http://agent.test:3000/"])

    assert code == 0
    url, body, headers = calls[0]
    assert url == "http://agent.test:3000/test-secret"
    assert body == {"query": "is the shelter open"}
    assert headers == {"Dry-Run": "true"}
    assert capsys.readouterr().out.strip() == "Ok"


def test_query_error_status_returns_nonzero(monkeypatch):
    monkeypatch.setattr(
        cli.httpx, "post",
        lambda *a, **kw: httpx.Response(500, text="Anthropic API error"),
    )
    assert cli.main(["query", "roads"]) == 1


def test_query_connection_failure_returns_nonzero(monkeypatch, capsys):
    def boom(*a, **kw):
        raise httpx.ConnectError("refused")

    monkeypatch.setattr(cli.httpx, "post", boom)

    assert cli.main(["query", "roads"]) == 1
    assert "Request failed" in capsys.readouterr().err
