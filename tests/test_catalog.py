# tests/test_catalog.py
from urllib.parse import parse_qs

import pytest

from marketplace import (
    ApiClient, CatalogService, Category, NotFoundError, ProductFilters, ServerError, ValidationError,
)
from stub_server.database import CATEGORIES

from .fakes import FakeResponse, FakeSession


def _query(request_log):
    return parse_qs(request_log[-1]["query"])


def test_list_without_filters_sends_no_query(client, request_log):
    products = client.list_products()
    assert request_log[-1]["path"] == "/products"
    assert request_log[-1]["query"] == ""
    assert [p.id for p in products] == ["p1", "p2", "p3", "p4", "p5"]


def test_empty_filter_set_sends_no_query(client, request_log):
    client.list_products(ProductFilters(search=""))
    assert request_log[-1]["query"] == ""


def test_inverted_range_sent_unmodified(client, request_log):
    products = client.list_products(ProductFilters(min_price=50, max_price=10))
    assert _query(request_log) == {"minPrice": ["50"], "maxPrice": ["10"]}
    assert products == []


def test_zero_bound_is_sent(client, request_log):
    products = client.list_products(ProductFilters(max_price=0))
    assert _query(request_log) == {"maxPrice": ["0"]}
    assert [p.id for p in products] == ["p5"]


def test_absent_bound_is_omitted(client, request_log):
    client.list_products(ProductFilters(min_price=None, max_price=100))
    assert "minPrice" not in _query(request_log)


def test_search_and_category(client, request_log):
    products = client.list_products(ProductFilters(search="SOFÁ", category=Category.FURNITURE))
    assert _query(request_log) == {"search": ["SOFÁ"], "category": ["Móvel"]}
    assert [p.title for p in products] == ["Sofá retrátil"]


def test_server_order_kept():
    body = [
        {"id": i, "title": i, "description": "", "price": price, "category": "Papelaria",
         "images": [], "views": 0, "seller": {"id": "s", "name": "S", "phone": "1"}}
        for i, price in (("b", 9.0), ("a", 1.0), ("c", 5.0))
    ]
    catalog = CatalogService(ApiClient("http://x", session=FakeSession(FakeResponse(200, body))))
    assert [p.id for p in catalog.list_products()] == ["b", "a", "c"]


def test_catalog_bearer_present_and_absent(client, store, request_log):
    store.set("abc")
    client.list_products()
    assert request_log[-1]["authorization"] == "Bearer abc"
    store.clear()
    client.list_products()
    assert request_log[-1]["authorization"] is None


def test_get_product_counts_views(client):
    first = client.get_product("p1")
    second = client.get_product("p1")
    assert first.title == "Sofá retrátil"
    assert second.views == first.views + 1
    assert first.thumbnail == first.images[0]


def test_get_missing_product(client):
    with pytest.raises(NotFoundError) as info:
        client.get_product("does-not-exist")
    assert info.value.message == "product not found"


def test_null_product_body_is_not_found():
    catalog = CatalogService(ApiClient("http://x", session=FakeSession(FakeResponse(200, content=b"null"))))
    with pytest.raises(NotFoundError):
        catalog.get_product("p1")


def test_malformed_product_is_server_error():
    bad = {"id": "p", "title": "t", "description": "", "price": -1, "category": "Papelaria",
           "seller": {"id": "s", "name": "S", "phone": "1"}}
    catalog = CatalogService(ApiClient("http://x", session=FakeSession(FakeResponse(200, bad))))
    with pytest.raises(ServerError):
        catalog.get_product("p")


def test_categories(client, request_log):
    assert client.list_categories() == CATEGORIES
    assert request_log[-1]["path"] == "/products/categories"


@pytest.mark.parametrize("product_id", ["", "  "])
def test_blank_product_id_never_hits_network(client, request_log, product_id):
    with pytest.raises(ValidationError) as info:
        client.get_product(product_id)
    assert "id" in info.value.fields
    assert request_log == []


def test_id_colliding_with_categories_route_is_not_found(client, request_log):
    with pytest.raises(NotFoundError):
        client.get_product("categories")
    assert request_log[-1]["path"] == "/products/categories"
