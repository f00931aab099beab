from __future__ import annotations

from html import escape

import streamlit as st

from components.sidebar import select_product
from data.api_client import StorefrontClient
from data.models import Product

GRID_COLUMNS = 3


def _render_card(product: Product) -> None:
    st.image(product.image_url or "https://placehold.co/300x200?text=No+image", use_container_width=True)
    st.markdown(
        f"""
<div class="product-card">
  <div class="product-name">{escape(product.name)}</div>
  <div class="product-seller">by {escape(product.seller)}</div>
  <div class="product-price">${product.price:,.2f}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
    st.button("View", key=f"view_{product.id}", on_click=select_product, args=(product.id,))


def _render_new_listing_form(client: StorefrontClient, seller_name: str) -> None:
    with st.expander("➕ List a product", expanded=False):
        with st.form("new_product", clear_on_submit=True):
            name = st.text_input("Name")
            description = st.text_area("Description")
            price = st.number_input("Price", min_value=0.0, step=0.01, format="%.2f")
            image_url = st.text_input("Image URL", help="Leave blank to use a placeholder")
            seller = st.text_input("Seller", value=seller_name)
            submitted = st.form_submit_button("Create listing")

        if submitted:
            if not name.strip() or not seller.strip():
                st.error("Name and seller are required")
                return
            product = client.create_product(
                {
                    "name": name.strip(),
                    "description": description,
                    "price": price,
                    "imageUrl": image_url.strip(),
                    "seller": seller.strip(),
                }
            )
            st.success(f"Listed **{product.name}** ({product.id})")


def render(client: StorefrontClient, seller_name: str) -> None:
    st.title("Catalog")

    _render_new_listing_form(client, seller_name)

    products = client.get_products()
    if client.last_warning:
        st.warning(client.last_warning)
    st.caption(f"{len(products)} products · data source: **{client.last_source}**")

    if not products:
        st.info("No products listed yet.")
        return

    cols = st.columns(GRID_COLUMNS)
    for i, product in enumerate(products):
        with cols[i % GRID_COLUMNS]:
            _render_card(product)
