from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class OrderStatus(str, Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


@dataclass(frozen=True)
class Product:
    """A catalog listing, in the client-facing shape."""
    id: str
    name: str
    price: float
    seller: str
    description: str = ""
    image_url: str = ""  # falsy -> render a placeholder

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "imageUrl": self.image_url,
            "seller": self.seller,
        }

    def merged(self, **changes: Any) -> "Product":
        return replace(self, **changes)


@dataclass(frozen=True)
class Order:
    """
    A placed order.

    `product_name` and `total_price` are snapshots taken by the caller at order
    time; they are never reconciled against the live product.
    """
    id: str
    product_id: str
    buyer_name: str
    buyer_email: str
    shipping_address: str
    product_name: str = ""
    quantity: int = 1
    total_price: float = 0.0
    status: str = OrderStatus.PENDING.value
    created_at: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "productId": self.product_id,
            "productName": self.product_name,
            "buyerName": self.buyer_name,
            "buyerEmail": self.buyer_email,
            "shippingAddress": self.shipping_address,
            "quantity": self.quantity,
            "totalPrice": self.total_price,
            "status": self.status,
            "createdAt": self.created_at,
        }

    def merged(self, **changes: Any) -> "Order":
        return replace(self, **changes)
