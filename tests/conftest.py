"""Shared test fixtures for the even server."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from even_server.config import ServerSettings
from even_server.server import create_app


BASE_BODY = {"id": 123, "name": "Sier", "elements": [{"inner": True}]}
EXTENDED_BODY = {**BASE_BODY, "optional": "Added"}


@pytest.fixture
def settings() -> ServerSettings:
    return ServerSettings()


@pytest.fixture
def app(settings: ServerSettings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
