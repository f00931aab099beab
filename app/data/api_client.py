"""
Storefront API client
=====================
What the UI uses to talk to the HTTP API (`api.server`).

Mirrors the server-side fallback one layer up: if the API is unreachable or
answers with a non-2xx status, reads are served from the shared mock dataset
and writes are synthesized from the caller's input. Views therefore never see
an exception, except `NotFoundError` for ids nobody knows about.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, TypeVar
from urllib.parse import quote

import requests

from config import AppConfig
from data.errors import NotFoundError, RemoteError
from data.mappers import (
    from_order_input,
    from_order_update,
    from_product_input,
    order_from_payload,
    product_from_payload,
)
from data.mock_data import MOCK_ORDERS, MOCK_PRODUCTS, find_mock_order, find_mock_product
from data.models import Order, Product
from data.service import new_record_id, with_fallback

log = logging.getLogger(__name__)

T = TypeVar("T")


class StorefrontClient:
    """
    requests-based client for /api/products and /api/orders.

    Every public method returns domain objects; `last_source` records whether
    the most recent answer came from the API or from mock data.
    """

    def __init__(self, cfg: AppConfig, timeout: float = 10.0):
        self.cfg = cfg
        self.timeout = timeout
        self.last_source: Optional[str] = None
        self.last_warning: Optional[str] = None
        self._base_url = cfg.api_base_url.rstrip("/")

    def _request(self, method: str, path: str, payload: Optional[Mapping[str, Any]] = None) -> Any:
        url = f"{self._base_url}{path}"
        log.debug("%s %s", method, url)
        try:
            resp = requests.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteError(f"{method} {path} failed: {type(e).__name__}") from e

        if resp.status_code >= 300:
            try:
                detail = resp.json().get("error")
            except (ValueError, AttributeError):
                detail = None
            raise RemoteError(
                f"{method} {path} returned HTTP {resp.status_code}: {detail or 'no detail'}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise RemoteError(f"{method} {path} returned a non-JSON body") from e

    def _run(self, primary: Callable[[], T], fallback: Callable[[], T], label: str) -> T:
        result = with_fallback(primary, fallback, skip_primary=False, label=f"client {label}", primary_source="api")
        self.last_source = result.source
        self.last_warning = result.warning
        return result.value

    # --- products -------------------------------------------------------------

    def get_products(self) -> list[Product]:
        return self._run(
            lambda: [product_from_payload(p) for p in self._request("GET", "/products")],
            lambda: list(MOCK_PRODUCTS),
            "get products",
        )

    def get_product(self, product_id: str) -> Product:
        def _mock() -> Product:
            product = find_mock_product(product_id)
            if product is None:
                raise NotFoundError("Product not found")
            return product

        return self._run(
            lambda: product_from_payload(self._request("GET", f"/products/{quote(product_id, safe='')}")),
            _mock,
            f"get product {product_id}",
        )

    def create_product(self, data: Mapping[str, Any]) -> Product:
        return self._run(
            lambda: product_from_payload(self._request("POST", "/products", data)),
            lambda: product_from_payload({**from_product_input(data), "id": new_record_id("prod")}),
            "create product",
        )

    def update_product(self, product_id: str, data: Mapping[str, Any]) -> Product:
        return self._run(
            lambda: product_from_payload(self._request("PUT", f"/products/{quote(product_id, safe='')}", data)),
            lambda: product_from_payload({**from_product_input(data), "id": product_id}),
            f"update product {product_id}",
        )

    def delete_product(self, product_id: str) -> None:
        self._run(
            lambda: self._request("DELETE", f"/products/{quote(product_id, safe='')}"),
            lambda: None,
            f"delete product {product_id}",
        )

    # --- orders ---------------------------------------------------------------

    def get_orders(self) -> list[Order]:
        return self._run(
            lambda: [order_from_payload(o) for o in self._request("GET", "/orders")],
            lambda: list(MOCK_ORDERS),
            "get orders",
        )

    def get_order(self, order_id: str) -> Order:
        def _mock() -> Order:
            order = find_mock_order(order_id)
            if order is None:
                raise NotFoundError("Order not found")
            return order

        return self._run(
            lambda: order_from_payload(self._request("GET", f"/orders/{quote(order_id, safe='')}")),
            _mock,
            f"get order {order_id}",
        )

    def create_order(self, data: Mapping[str, Any]) -> Order:
        return self._run(
            lambda: order_from_payload(self._request("POST", "/orders", data)),
            lambda: order_from_payload({**from_order_input(data), "id": new_record_id("order")}),
            "create order",
        )

    def update_order(self, order_id: str, data: Mapping[str, Any]) -> Order:
        def _mock() -> Order:
            order = find_mock_order(order_id)
            if order is None:
                raise NotFoundError("Order not found")
            return order_from_payload({**order.to_payload(), **from_order_update(data)})

        return self._run(
            lambda: order_from_payload(self._request("PUT", f"/orders/{quote(order_id, safe='')}", data)),
            _mock,
            f"update order {order_id}",
        )


def get_storefront_client(cfg: AppConfig) -> StorefrontClient:
    """Factory function to get a storefront API client instance."""
    return StorefrontClient(cfg, timeout=cfg.store_timeout_seconds)
