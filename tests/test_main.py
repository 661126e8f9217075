"""Tests for the module entrypoint."""

from __future__ import annotations

import asyncio
import logging
import socket
from unittest.mock import patch

import pytest
import uvicorn

from even_server import __main__ as entry
from even_server.config import ServerSettings
from even_server.server import create_app


READY = "Running Python+FastAPI server on 127.0.0.1"


def _server(settings: ServerSettings) -> entry.EvenServer:
    config = uvicorn.Config(create_app(settings), host=settings.host, port=settings.port)
    return entry.EvenServer(config, settings)


class TestMain:
    def test_runs_server_with_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVEN_PORT", "9000")
        monkeypatch.setenv("EVEN_HOST", "127.0.0.1")
        with patch.object(entry.EvenServer, "run", autospec=True) as run:
            entry.main()

        run.assert_called_once()
        server = run.call_args.args[0]
        assert server.config.host == "127.0.0.1"
        assert server.config.port == 9000
        assert server.config.log_level == "info"
        assert server.config.app.state.settings.port == 9000

    def test_bad_config_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVEN_PORT", "not-a-port")
        with patch.object(entry.EvenServer, "run") as run, pytest.raises(SystemExit) as excinfo:
            entry.main()

        assert excinfo.value.code == 2
        run.assert_not_called()

    def test_port_in_use_exits_without_readiness(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
            taken.bind(("127.0.0.1", 0))
            taken.listen(1)
            monkeypatch.setenv("EVEN_HOST", "127.0.0.1")
            monkeypatch.setenv("EVEN_PORT", str(taken.getsockname()[1]))

            with caplog.at_level(logging.INFO), pytest.raises(SystemExit) as excinfo:
                entry.main()

        assert excinfo.value.code != 0
        assert not any(r.getMessage().startswith("Running ") for r in caplog.records if r.name == "even_server")


class TestReadiness:
    def test_logged_once_bound(self, caplog: pytest.LogCaptureFixture) -> None:
        async def bound(self, sockets=None) -> None:
            self.started = True

        server = _server(ServerSettings(host="127.0.0.1", port=8123))
        with patch.object(uvicorn.Server, "startup", bound), caplog.at_level(logging.INFO, logger="even_server"):
            asyncio.run(server.startup())

        messages = [r.getMessage() for r in caplog.records if r.name == "even_server"]
        assert messages == [f"{READY}:8123"]

    def test_not_logged_when_startup_aborts(self, caplog: pytest.LogCaptureFixture) -> None:
        async def aborted(self, sockets=None) -> None:
            self.should_exit = True

        server = _server(ServerSettings(host="127.0.0.1"))
        with patch.object(uvicorn.Server, "startup", aborted), caplog.at_level(logging.INFO, logger="even_server"):
            asyncio.run(server.startup())

        assert not [r for r in caplog.records if r.name == "even_server"]
