"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
All data access goes through data.api_client.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.header import render_header  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.styles import APP_TITLE, apply_theme  # noqa: E402
from config import get_config  # noqa: E402
from data.api_client import get_storefront_client  # noqa: E402
from logging_setup import configure_logging  # noqa: E402

from views import catalog, orders, product  # noqa: E402


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg.log_level)
    client = get_storefront_client(cfg)
    state = render_sidebar(cfg)

    render_header(
        app_name=APP_TITLE,
        subtitle="Buy and sell products",
        right_pill=f"API: {cfg.api_base_url}",
    )

    # Routing only
    if state.view == "catalog":
        catalog.render(client, state.seller_name)
    elif state.view == "product":
        product.render(client, state.selected_product_id)
    elif state.view == "orders":
        orders.render(client, state.seller_name)
    else:
        st.error("Unknown view")


if __name__ == "__main__":
    main()
