from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from data.models import Order, OrderStatus, Product


PLACEHOLDER_IMAGE = "/placeholder.svg?height=200&width=300"

# Loaded once per process and never mutated. Fallback "writes" build new
# objects instead of inserting here.
MOCK_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="prod_1",
        name="Wireless Headphones",
        description="High-quality wireless headphones with noise cancellation",
        price=129.99,
        image_url=PLACEHOLDER_IMAGE,
        seller="Audio Tech",
    ),
    Product(
        id="prod_2",
        name="Smart Watch",
        description="Fitness tracker and smartwatch with heart rate monitoring",
        price=199.99,
        image_url=PLACEHOLDER_IMAGE,
        seller="Tech Gear",
    ),
    Product(
        id="prod_3",
        name="Portable Bluetooth Speaker",
        description="Waterproof portable speaker with 20-hour battery life",
        price=79.99,
        image_url=PLACEHOLDER_IMAGE,
        seller="Sound Systems",
    ),
    Product(
        id="prod_4",
        name="Mechanical Keyboard",
        description="RGB mechanical keyboard with customizable switches",
        price=149.99,
        image_url=PLACEHOLDER_IMAGE,
        seller="Tech Accessories",
    ),
    Product(
        id="prod_5",
        name="Smartphone Stand",
        description="Adjustable smartphone stand for desk or bedside",
        price=24.99,
        image_url=PLACEHOLDER_IMAGE,
        seller="Mobile Accessories",
    ),
)


def _iso(dt: datetime) -> str:
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


_LOADED_AT = datetime.now(timezone.utc)

MOCK_ORDERS: tuple[Order, ...] = (
    Order(
        id="order_1",
        product_id="prod_1",
        product_name="Wireless Headphones",
        buyer_name="John Doe",
        buyer_email="john@example.com",
        shipping_address="123 Main St, City, Country",
        quantity=1,
        total_price=129.99,
        status=OrderStatus.PENDING.value,
        created_at=_iso(_LOADED_AT),
    ),
    Order(
        id="order_2",
        product_id="prod_2",
        product_name="Smart Watch",
        buyer_name="Jane Smith",
        buyer_email="jane@example.com",
        shipping_address="456 Oak Ave, Town, Country",
        quantity=1,
        total_price=199.99,
        status=OrderStatus.SHIPPED.value,
        created_at=_iso(_LOADED_AT - timedelta(days=1)),
    ),
)


def find_mock_product(product_id: str) -> Optional[Product]:
    return next((p for p in MOCK_PRODUCTS if p.id == product_id), None)


def find_mock_order(order_id: str) -> Optional[Order]:
    return next((o for o in MOCK_ORDERS if o.id == order_id), None)
