"""Fallback policy: record store first, mock data when unconfigured or failing."""

from dataclasses import replace

import pytest

from data import service
from data.errors import NotFoundError
from data.mock_data import MOCK_ORDERS, MOCK_PRODUCTS, find_mock_order
from data.models import Product
from tests.fakes import FakeResponse

WIDGET = {"name": "Widget", "price": 9.99, "seller": "Acme"}


class TestWithFallback:

    def test_skip_primary_never_calls_primary(self):
        def primary():
            raise AssertionError("primary must not run")

        result = service.with_fallback(primary, lambda: "mock", skip_primary=True, label="t")
        assert result.value == "mock"
        assert result.source == "mock"
        assert result.warning

    def test_primary_success(self):
        result = service.with_fallback(lambda: "live", lambda: "mock", skip_primary=False, label="t")
        assert result.value == "live"
        assert result.source == "record_store"
        assert result.warning is None

    def test_any_primary_error_falls_back(self):
        def primary():
            raise KeyError("boom")

        result = service.with_fallback(primary, lambda: "mock", skip_primary=False, label="t")
        assert result.value == "mock"
        assert "KeyError" in result.warning

    def test_fallback_errors_propagate(self):
        def primary():
            raise RuntimeError("down")

        def fallback():
            raise NotFoundError("Product not found")

        with pytest.raises(NotFoundError):
            service.with_fallback(primary, fallback, skip_primary=False, label="t")

    def test_primary_source_label(self):
        result = service.with_fallback(lambda: 1, lambda: 0, skip_primary=False, label="t", primary_source="api")
        assert result.source == "api"


class TestUnconfiguredProducts:

    @pytest.mark.parametrize("product", MOCK_PRODUCTS, ids=lambda p: p.id)
    def test_every_mock_product_is_gettable(self, unconfigured_cfg, product):
        assert service.get_product(unconfigured_cfg, product.id).value == product

    def test_list_is_mock_dataset(self, unconfigured_cfg):
        result = service.list_products(unconfigured_cfg)
        assert result.value == list(MOCK_PRODUCTS)
        assert result.source == "mock"

    def test_get_unknown_raises(self, unconfigured_cfg):
        with pytest.raises(NotFoundError):
            service.get_product(unconfigured_cfg, "nonexistent")

    def test_create_synthesizes(self, unconfigured_cfg):
        product = service.create_product(unconfigured_cfg, WIDGET).value
        assert product.id.startswith("prod_")
        assert (product.name, product.price, product.seller) == ("Widget", 9.99, "Acme")
        assert product.description == ""
        assert product.image_url == ""

    def test_create_does_not_touch_mock_dataset(self, unconfigured_cfg):
        before = tuple(MOCK_PRODUCTS)
        service.create_product(unconfigured_cfg, WIDGET)
        assert MOCK_PRODUCTS == before

    def test_update_merges_over_mock(self, unconfigured_cfg):
        updated = service.update_product(
            unconfigured_cfg, "prod_1", {"name": "Headphones v2", "price": 99.0, "seller": "Audio Tech"}
        ).value
        assert updated.id == "prod_1"
        assert updated.name == "Headphones v2"
        assert updated.price == 99.0

    def test_update_unknown_is_passthrough(self, unconfigured_cfg):
        updated = service.update_product(unconfigured_cfg, "prod_zzz", WIDGET).value
        assert updated == Product(id="prod_zzz", name="Widget", price=9.99, seller="Acme")

    @pytest.mark.parametrize("product_id", ["prod_1", "nope", ""])
    def test_delete_always_succeeds(self, unconfigured_cfg, product_id):
        assert service.delete_product(unconfigured_cfg, product_id).value is True


class TestUnconfiguredOrders:

    def test_list(self, unconfigured_cfg):
        assert service.list_orders(unconfigured_cfg).value == list(MOCK_ORDERS)

    def test_get(self, unconfigured_cfg):
        assert service.get_order(unconfigured_cfg, "order_2").value.status == "shipped"

    def test_get_unknown(self, unconfigured_cfg):
        with pytest.raises(NotFoundError):
            service.get_order(unconfigured_cfg, "order_999")

    def test_create_defaults(self, unconfigured_cfg, buyer):
        order = service.create_order(unconfigured_cfg, {"productId": "prod_3", **buyer}).value
        assert order.id.startswith("order_")
        assert order.quantity == 1
        assert order.status == "pending"
        assert order.created_at
        assert order.buyer_name == buyer["buyerName"]

    def test_update_status_keeps_other_fields(self, unconfigured_cfg):
        original = find_mock_order("order_1")
        updated = service.update_order(unconfigured_cfg, "order_1", {"status": "shipped"}).value
        assert updated.status == "shipped"
        assert updated.merged(status=original.status) == original

    def test_update_cannot_rewrite_created_at(self, unconfigured_cfg):
        original = find_mock_order("order_1")
        updated = service.update_order(unconfigured_cfg, "order_1", {"createdAt": "1999-01-01"}).value
        assert updated.created_at == original.created_at

    def test_update_unknown(self, unconfigured_cfg):
        with pytest.raises(NotFoundError):
            service.update_order(unconfigured_cfg, "order_999", {"status": "shipped"})


class TestConfiguredStore:

    def test_list_from_store(self, configured_cfg, fake_http, table_url):
        fake_http.add(
            "GET",
            table_url("Products"),
            FakeResponse(200, {"records": [{"id": "recA", "fields": {"name": "Lamp", "price": 5, "seller": "L"}}]}),
        )
        result = service.list_products(configured_cfg)
        assert result.source == "record_store"
        assert [p.id for p in result.value] == ["recA"]

    def test_store_failure_falls_back(self, configured_cfg, fake_http):
        # no routes: every call is a connection error
        result = service.list_products(configured_cfg)
        assert result.source == "mock"
        assert result.value == list(MOCK_PRODUCTS)

    def test_find_throws_serves_mock_product(self, configured_cfg, fake_http):
        assert service.get_product(configured_cfg, "prod_1").value.id == "prod_1"

    def test_store_404_and_no_mock_is_not_found(self, configured_cfg, fake_http, table_url):
        fake_http.add("GET", f"{table_url('Products')}/nonexistent", FakeResponse(404, {"error": "NOT_FOUND"}))
        with pytest.raises(NotFoundError):
            service.get_product(configured_cfg, "nonexistent")

    def test_create_in_store(self, configured_cfg, fake_http, table_url):
        fake_http.add(
            "POST",
            table_url("Products"),
            lambda json, **_: FakeResponse(200, {"id": "recNew", "fields": json["fields"]}),
        )
        product = service.create_product(configured_cfg, WIDGET).value
        assert product == Product(id="recNew", name="Widget", price=9.99, seller="Acme")
        assert fake_http.calls[0]["json"]["fields"]["description"] == ""

    def test_delete_store_error_still_succeeds(self, configured_cfg, fake_http, table_url):
        fake_http.add("DELETE", f"{table_url('Products')}/recX", FakeResponse(500, {"error": "SERVER_ERROR"}))
        assert service.delete_product(configured_cfg, "recX").value is True

    def test_update_order_patches_only_changes(self, configured_cfg, fake_http, table_url):
        url = f"{table_url('Orders')}/recO"
        stored = {"productId": "prod_1", "buyerName": "Ann", "status": "pending", "createdAt": "2024-01-01T00:00:00.000Z"}
        fake_http.add("GET", url, FakeResponse(200, {"id": "recO", "fields": stored}))
        fake_http.add(
            "PATCH",
            url,
            lambda json, **_: FakeResponse(200, {"id": "recO", "fields": {**stored, **json["fields"]}}),
        )

        order = service.update_order(configured_cfg, "recO", {"status": "delivered"}).value

        assert order.status == "delivered"
        assert order.created_at == "2024-01-01T00:00:00.000Z"
        assert fake_http.calls[-1]["json"] == {"fields": {"status": "delivered"}}

    def test_create_order_stamps_created_at(self, configured_cfg, fake_http, table_url, buyer):
        fake_http.add(
            "POST",
            table_url("Orders"),
            lambda json, **_: FakeResponse(200, {"id": "recN", "fields": json["fields"]}),
        )
        order = service.create_order(configured_cfg, {"productId": "prod_1", **buyer}).value
        sent = fake_http.calls[0]["json"]["fields"]
        assert sent["createdAt"] == order.created_at
        assert sent["status"] == "pending"

    def test_use_mock_skips_store(self, configured_cfg, fake_http):
        cfg = replace(configured_cfg, use_mock=True)
        result = service.list_orders(cfg)
        assert result.source == "mock"
        assert fake_http.calls == []

    def test_missing_table_name_skips_that_store(self, configured_cfg, fake_http, table_url):
        cfg = replace(configured_cfg, products_table=None)
        fake_http.add("GET", table_url("Orders"), FakeResponse(200, {"records": []}))

        products = service.list_products(cfg)
        orders = service.list_orders(cfg)

        assert products.source == "mock"
        assert products.value == list(MOCK_PRODUCTS)
        assert orders.source == "record_store"
        assert [c["url"] for c in fake_http.calls] == [table_url("Orders")]
