"""Shared fixtures: the stub server behind a TestClient."""

import pytest
from fastapi.testclient import TestClient

from marketplace import MarketplaceClient, MemorySessionStore, Settings
from stub_server import database
from stub_server.main import app

BASE_URL = "http://testserver"


@pytest.fixture
def stub():
    database.reset()
    return TestClient(app)


@pytest.fixture
def request_log():
    return database.REQUEST_LOG


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def settings(tmp_path):
    return Settings(api_base_url=BASE_URL, token_path=tmp_path / "token")


@pytest.fixture
def client(stub, store, settings):
    return MarketplaceClient(settings, session_store=store, http=stub)


@pytest.fixture
def logged_in(client):
    client.login("maria@example.com", "maria123")
    database.REQUEST_LOG.clear()
    return client
