"""
Integration Test Fixtures.

Run the whole CLI against an in-process stub server.
"""

from collections.abc import Callable
from unittest.mock import patch

import pytest
from rich.console import Console

from reqline.request.dispatcher import create_http_client


@pytest.fixture
def plain_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """
    Replace the stdout console with one that never emits color codes.

    Writes go to whatever sys.stdout is when printing, so CliRunner
    still captures them.
    """
    console = Console(force_terminal=False, color_system=None)
    monkeypatch.setattr("reqline.cli.commands.http.console", console)
    return console


@pytest.fixture
def serve(plain_console) -> Callable:
    """
    Route the CLI's HTTP client to a stub server.

    Usage:
        def test_get(serve, stub_server):
            server = stub_server(status_code=200, content=b"ok")
            with serve(server.transport):
                runner.invoke(app, ["get", "https://example.test/"])
    """

    def _serve(transport):
        return patch(
            "reqline.cli.commands.http.build_client",
            side_effect=lambda: create_http_client(user_agent="reqline-test", transport=transport),
        )

    return _serve
