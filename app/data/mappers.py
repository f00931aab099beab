"""
Shape mapping between record-store field maps and domain objects.

The record store keeps each row as an untyped `fields` map. Everything that
crosses that boundary goes through the encoder/decoder pairs below, so the
rest of the code only ever sees `Product` / `Order`.

All functions are pure and total: a missing or malformed field decodes to the
zero value of its type instead of raising.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from data.connection import RawRecord
from data.models import Order, OrderStatus, Product

PRODUCT_FIELDS = ("name", "description", "price", "imageUrl", "seller")
ORDER_FIELDS = (
    "productId",
    "productName",
    "buyerName",
    "buyerEmail",
    "shippingAddress",
    "quantity",
    "totalPrice",
    "status",
    "createdAt",
)
# productId and createdAt are written once at creation
ORDER_MUTABLE_FIELDS = (
    "productName",
    "buyerName",
    "buyerEmail",
    "shippingAddress",
    "quantity",
    "totalPrice",
    "status",
)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _str(v: Any) -> str:
    if v is None:
        return ""
    return v if isinstance(v, str) else str(v)


def _float(v: Any) -> float:
    if v is None or isinstance(v, bool):
        return 0.0
    try:
        return float(v)
    except (TypeError, ValueError):
        return 0.0


def _int(v: Any) -> int:
    if v is None or isinstance(v, bool):
        return 0
    try:
        return int(float(v))
    except (TypeError, ValueError):
        return 0


# --- record store -> domain ---------------------------------------------------

def to_product(raw: RawRecord) -> Product:
    f = raw.fields
    return Product(
        id=raw.id,
        name=_str(f.get("name")),
        description=_str(f.get("description")),
        price=_float(f.get("price")),
        image_url=_str(f.get("imageUrl")),
        seller=_str(f.get("seller")),
    )


def to_order(raw: RawRecord) -> Order:
    f = raw.fields
    return Order(
        id=raw.id,
        product_id=_str(f.get("productId")),
        product_name=_str(f.get("productName")),
        buyer_name=_str(f.get("buyerName")),
        buyer_email=_str(f.get("buyerEmail")),
        shipping_address=_str(f.get("shippingAddress")),
        quantity=_int(f.get("quantity")),
        total_price=_float(f.get("totalPrice")),
        status=_str(f.get("status")),
        created_at=_str(f.get("createdAt")) or raw.created_time,
    )


# --- caller input -> record store ---------------------------------------------

def from_product_input(payload: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "name": _str(payload.get("name")),
        "description": _str(payload.get("description")),
        "price": _float(payload.get("price")),
        "imageUrl": _str(payload.get("imageUrl")),
        "seller": _str(payload.get("seller")),
    }


def from_order_input(payload: Mapping[str, Any], *, now: Optional[str] = None) -> dict[str, Any]:
    """Field map for a NEW order. `createdAt` is stamped here and nowhere else."""
    quantity = payload.get("quantity")
    return {
        "productId": _str(payload.get("productId")),
        "productName": _str(payload.get("productName")),
        "buyerName": _str(payload.get("buyerName")),
        "buyerEmail": _str(payload.get("buyerEmail")),
        "shippingAddress": _str(payload.get("shippingAddress")),
        "quantity": 1 if quantity is None else _int(quantity),
        "totalPrice": _float(payload.get("totalPrice")),
        "status": _str(payload.get("status")) or OrderStatus.PENDING.value,
        "createdAt": now or utc_now_iso(),
    }


def from_order_update(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Partial field map: only mutable fields the caller actually sent."""
    out: dict[str, Any] = {}
    for key in ORDER_MUTABLE_FIELDS:
        if key not in payload or payload[key] is None:
            continue
        v = payload[key]
        if key == "quantity":
            out[key] = _int(v)
        elif key == "totalPrice":
            out[key] = _float(v)
        else:
            out[key] = _str(v)
    return out


# --- client-facing JSON -> domain ---------------------------------------------

def product_from_payload(payload: Mapping[str, Any]) -> Product:
    return to_product(RawRecord(id=_str(payload.get("id")), fields=dict(payload)))


def order_from_payload(payload: Mapping[str, Any]) -> Order:
    return to_order(RawRecord(id=_str(payload.get("id")), fields=dict(payload)))
