"""Tests for the quotes CLI (scrape / serve commands)."""

import json
from unittest.mock import patch

import httpx
import respx
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_TARGET = "https://quotes.toscrape.com"

_HTML = """\
<html><body>
  <div class="quote">
    <span class="text">First.</span><small class="author">A</small>
    <div class="tags"><a class="tag" href="/tag/one/page/1/">one</a></div>
  </div>
  <div class="quote">
    <span class="text">Second.</span><small class="author">B</small>
    <div class="tags"></div>
  </div>
</body></html>
"""


def test_scrape_prints_json(monkeypatch):
    monkeypatch.setattr("backend.config.settings.target_url", _TARGET)
    with respx.mock:
        respx.get(_TARGET).mock(return_value=httpx.Response(200, text=_HTML))
        result = runner.invoke(app, ["scrape"])

    assert result.exit_code == 0
    assert json.loads(result.stdout.strip().splitlines()[-1]) == [
        {"quote": "First.", "author": "A", "tags": ["/tag/one/page/1/"]},
        {"quote": "Second.", "author": "B", "tags": []},
    ]


def test_scrape_respects_limit_and_url():
    with respx.mock:
        respx.get("https://example.com/q").mock(return_value=httpx.Response(200, text=_HTML))
        result = runner.invoke(app, ["scrape", "--url", "https://example.com/q", "--limit", "1"])

    assert result.exit_code == 0
    assert [d["quote"] for d in json.loads(result.stdout.strip().splitlines()[-1])] == ["First."]


def test_scrape_failure_exits_nonzero():
    with respx.mock:
        respx.get(_TARGET).mock(side_effect=httpx.ConnectError("Connection refused"))
        result = runner.invoke(app, ["scrape", "--url", _TARGET])

    assert result.exit_code == 1
    assert "Failed to scrape" in result.output


def test_serve_runs_uvicorn_on_requested_port():
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--port", "9090"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    _, kwargs = mock_run.call_args
    assert kwargs == {"host": "0.0.0.0", "port": 9090}


def test_serve_defaults_to_port_8080():
    with patch("uvicorn.run") as mock_run:
        runner.invoke(app, ["serve"])

    assert mock_run.call_args.kwargs["port"] == 8080
