from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, TypeVar

from config import AppConfig
from data.connection import get_record_store
from data.errors import NotFoundError
from data.mappers import (
    from_order_input,
    from_order_update,
    from_product_input,
    order_from_payload,
    product_from_payload,
    to_order,
    to_product,
    utc_now_iso,
)
from data.mock_data import MOCK_ORDERS, MOCK_PRODUCTS, find_mock_order, find_mock_product
from data.models import Order, Product

log = logging.getLogger(__name__)

T = TypeVar("T")

SOURCE_STORE = "record_store"
SOURCE_MOCK = "mock"


@dataclass(frozen=True)
class DataResult(Generic[T]):
    value: T
    source: str  # "mock" | "record_store"
    warning: str | None = None


def with_fallback(
    primary: Callable[[], T],
    fallback: Callable[[], T],
    *,
    skip_primary: bool,
    label: str,
    primary_source: str = SOURCE_STORE,
) -> DataResult[T]:
    """
    Try the primary source, otherwise serve from the mock dataset.
    The primary is the record store here and the HTTP API in the client.

    Anything `primary` raises (including a store-side 404) counts as "store
    unavailable". Errors raised by `fallback` itself are NOT caught; that is how
    NotFoundError reaches the caller.
    """
    if skip_primary:
        log.warning("%s: record store skipped (not configured or mock mode), serving mock data", label)
        return DataResult(value=fallback(), source=SOURCE_MOCK, warning="Record store not configured; using mock data")
    try:
        value = primary()
    except Exception as e:
        log.warning("%s: primary call failed (%s: %s), falling back to mock data", label, type(e).__name__, e)
        return DataResult(value=fallback(), source=SOURCE_MOCK, warning=f"Fell back to mock data: {type(e).__name__}")
    log.info("%s: served from %s", label, primary_source)
    return DataResult(value=value, source=primary_source)


def _skip_store(cfg: AppConfig, kind: str) -> bool:
    return cfg.use_mock or not cfg.table_configured(kind)


def new_record_id(prefix: str) -> str:
    return f"{prefix}_{int(time.time() * 1000)}"


def _mock_product_or_raise(product_id: str) -> Product:
    product = find_mock_product(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def _mock_order_or_raise(order_id: str) -> Order:
    order = find_mock_order(order_id)
    if order is None:
        raise NotFoundError("Order not found")
    return order


# --- products -----------------------------------------------------------------

def list_products(cfg: AppConfig) -> DataResult[list[Product]]:
    store = get_record_store(cfg)
    return with_fallback(
        primary=lambda: [to_product(r) for r in store.open_table("products").list_all()],
        fallback=lambda: list(MOCK_PRODUCTS),
        skip_primary=_skip_store(cfg, "products"),
        label="list products",
    )


def get_product(cfg: AppConfig, product_id: str) -> DataResult[Product]:
    store = get_record_store(cfg)
    return with_fallback(
        primary=lambda: to_product(store.open_table("products").find(product_id)),
        fallback=lambda: _mock_product_or_raise(product_id),
        skip_primary=_skip_store(cfg, "products"),
        label=f"get product {product_id}",
    )


def create_product(cfg: AppConfig, payload: Mapping[str, Any]) -> DataResult[Product]:
    store = get_record_store(cfg)
    fields = from_product_input(payload)
    return with_fallback(
        primary=lambda: to_product(store.open_table("products").create(fields)),
        fallback=lambda: product_from_payload({**fields, "id": new_record_id("prod")}),
        skip_primary=_skip_store(cfg, "products"),
        label="create product",
    )


def update_product(cfg: AppConfig, product_id: str, payload: Mapping[str, Any]) -> DataResult[Product]:
    """Full replace of the mutable product fields."""
    store = get_record_store(cfg)
    fields = from_product_input(payload)

    def _fallback() -> Product:
        updated = product_from_payload({**fields, "id": product_id})
        base = find_mock_product(product_id)
        if base is None:
            return updated
        return base.merged(
            name=updated.name,
            description=updated.description,
            price=updated.price,
            image_url=updated.image_url,
            seller=updated.seller,
        )

    return with_fallback(
        primary=lambda: to_product(store.open_table("products").update(product_id, fields)),
        fallback=_fallback,
        skip_primary=_skip_store(cfg, "products"),
        label=f"update product {product_id}",
    )


def delete_product(cfg: AppConfig, product_id: str) -> DataResult[bool]:
    store = get_record_store(cfg)

    def _destroy() -> bool:
        store.open_table("products").destroy(product_id)
        return True

    return with_fallback(
        primary=_destroy,
        fallback=lambda: True,
        skip_primary=_skip_store(cfg, "products"),
        label=f"delete product {product_id}",
    )


# --- orders -------------------------------------------------------------------

def list_orders(cfg: AppConfig) -> DataResult[list[Order]]:
    store = get_record_store(cfg)
    return with_fallback(
        primary=lambda: [to_order(r) for r in store.open_table("orders").list_all()],
        fallback=lambda: list(MOCK_ORDERS),
        skip_primary=_skip_store(cfg, "orders"),
        label="list orders",
    )


def get_order(cfg: AppConfig, order_id: str) -> DataResult[Order]:
    store = get_record_store(cfg)
    return with_fallback(
        primary=lambda: to_order(store.open_table("orders").find(order_id)),
        fallback=lambda: _mock_order_or_raise(order_id),
        skip_primary=_skip_store(cfg, "orders"),
        label=f"get order {order_id}",
    )


def create_order(cfg: AppConfig, payload: Mapping[str, Any]) -> DataResult[Order]:
    store = get_record_store(cfg)
    fields = from_order_input(payload, now=utc_now_iso())
    return with_fallback(
        primary=lambda: to_order(store.open_table("orders").create(fields)),
        fallback=lambda: order_from_payload({**fields, "id": new_record_id("order")}),
        skip_primary=_skip_store(cfg, "orders"),
        label="create order",
    )


def update_order(cfg: AppConfig, order_id: str, payload: Mapping[str, Any]) -> DataResult[Order]:
    """Partial update; used mostly to move `status` along."""
    store = get_record_store(cfg)
    changes = from_order_update(payload)

    def _update_remote() -> Order:
        table = store.open_table("orders")
        existing = table.find(order_id)
        if not changes:
            return to_order(existing)
        return to_order(table.update(order_id, changes))

    def _fallback() -> Order:
        base = _mock_order_or_raise(order_id)
        return order_from_payload({**base.to_payload(), **changes})

    return with_fallback(
        primary=_update_remote,
        fallback=_fallback,
        skip_primary=_skip_store(cfg, "orders"),
        label=f"update order {order_id}",
    )
