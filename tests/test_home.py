# tests/test_home.py
import asyncio

import requests

from marketplace import (
    ApiClient, AuthError, CatalogService, MemorySessionStore, NetworkError, ProductFilters, ProfileService,
    load_home,
)

from .fakes import FakeSession


def test_home_loads_both(logged_in):
    data = asyncio.run(logged_in.load_home())
    assert data.ok
    assert data.user.id == "s1"
    assert len(data.products) == 5


def test_home_keeps_products_when_profile_fails(client):
    data = asyncio.run(client.load_home(ProductFilters(category="Vestuário")))
    assert data.user is None
    assert [p.id for p in data.products] == ["p3"]
    assert len(data.errors) == 1
    assert isinstance(data.errors[0], AuthError)


def test_home_keeps_profile_when_products_fail(stub, logged_in):
    store = logged_in.session_store
    profile = ProfileService(ApiClient("http://testserver", store, session=stub))
    catalog = CatalogService(ApiClient("http://x", store, session=FakeSession(error=requests.ConnectionError("down"))))
    data = asyncio.run(load_home(profile, catalog))
    assert data.user.name == "Maria Souza"
    assert data.products == []
    assert isinstance(data.errors[0], NetworkError)


def test_home_both_fail():
    store = MemorySessionStore()
    down = FakeSession(error=requests.ConnectionError("down"))
    data = asyncio.run(load_home(ProfileService(ApiClient("http://x", store, session=down)),
                                 CatalogService(ApiClient("http://x", store, session=down))))
    assert data.user is None
    assert data.products == []
    assert len(data.errors) == 2
