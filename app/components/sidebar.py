from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    selected_product_id: Optional[str]
    seller_name: str


NAV_ITEMS = [
    ("🛍️ Catalog", "catalog"),
    ("📦 Product", "product"),
    ("🧾 Orders", "orders"),
]


def select_product(product_id: str) -> None:
    """Jump to the product view for `product_id` on the next rerun."""
    st.session_state["selected_product_id"] = product_id
    st.session_state["nav_label"] = NAV_ITEMS[1][0]


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🛒 Marketplace")
        st.caption("Buy and sell products")

        labels = [l for l, _ in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", labels[0])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        seller_name = st.text_input(
            "Your seller name",
            value=st.session_state.get("seller_name", ""),
            help="Used to split the orders view into your purchases and orders against your listings.",
        )
        st.session_state["seller_name"] = seller_name

        with st.expander("⚙️ Settings", expanded=False):
            st.markdown("**API**")
            st.code(cfg.api_base_url, language="text")
            st.caption(
                "Record store: "
                + ("configured" if cfg.store_configured else "not configured (mock data)")
            )

    return SidebarState(
        view=view,
        selected_product_id=st.session_state.get("selected_product_id"),
        seller_name=seller_name.strip(),
    )
