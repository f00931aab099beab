from __future__ import annotations

from typing import Iterable

import pandas as pd
import streamlit as st

from components.styles import status_pill
from data.api_client import StorefrontClient
from data.models import Order, OrderStatus, Product

COLUMNS = ["id", "createdAt", "productName", "quantity", "totalPrice", "buyerName", "buyerEmail", "status"]


def orders_frame(orders: Iterable[Order]) -> pd.DataFrame:
    df = pd.DataFrame([o.to_payload() for o in orders], columns=COLUMNS + ["productId", "shippingAddress"])
    if len(df):
        df["createdAt"] = pd.to_datetime(df["createdAt"], errors="coerce", utc=True)
        df = df.sort_values("createdAt", ascending=False, na_position="last")
    return df.reset_index(drop=True)


def orders_for_seller(orders: Iterable[Order], products: Iterable[Product], seller_name: str) -> list[Order]:
    """
    Orders placed against listings owned by `seller_name`.

    Orders carry no seller id, so ownership is resolved through the product's
    seller field.
    """
    if not seller_name:
        return []
    owned = {p.id for p in products if p.seller.lower() == seller_name.lower()}
    return [o for o in orders if o.product_id in owned]


def _render_table(orders: list[Order]) -> None:
    if not orders:
        st.info("No orders.")
        return
    st.dataframe(orders_frame(orders)[COLUMNS], use_container_width=True, hide_index=True)


def _render_status_editor(client: StorefrontClient, orders: list[Order]) -> None:
    if not orders:
        return
    st.subheader("Update status")
    by_id = {o.id: o for o in orders}
    order_id = st.selectbox(
        "Order",
        list(by_id),
        format_func=lambda oid: f"{oid} · {by_id[oid].product_name} · {by_id[oid].buyer_name}",
    )
    current = by_id[order_id]
    st.markdown(f"Current status: {status_pill(current.status)}", unsafe_allow_html=True)
    statuses = OrderStatus.values()
    new_status = st.selectbox(
        "New status",
        statuses,
        index=statuses.index(current.status) if current.status in statuses else 0,
    )
    if st.button("Update status"):
        updated = client.update_order(order_id, {"status": new_status})
        st.success(f"Order {updated.id} is now **{updated.status}**")


def render(client: StorefrontClient, seller_name: str) -> None:
    st.title("Orders")

    orders = client.get_orders()
    if client.last_warning:
        st.warning(client.last_warning)
    st.caption(f"data source: **{client.last_source}**")

    all_tab, seller_tab = st.tabs(["All orders", "Orders for my listings"])
    with all_tab:
        _render_table(orders)
        _render_status_editor(client, orders)
    with seller_tab:
        if not seller_name:
            st.info("Set your seller name in the sidebar to see orders for your listings.")
        else:
            _render_table(orders_for_seller(orders, client.get_products(), seller_name))
