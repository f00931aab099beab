from __future__ import annotations

from typing import Optional

import streamlit as st

from data.api_client import StorefrontClient
from data.errors import NotFoundError
from data.models import Product


def order_total(price: float, quantity: int) -> float:
    # Snapshot stored on the order; later price edits do not touch it.
    return round(price * quantity, 2)


def build_order_payload(product: Product, buyer_name: str, buyer_email: str, shipping_address: str, quantity: int) -> dict:
    return {
        "productId": product.id,
        "productName": product.name,
        "buyerName": buyer_name.strip(),
        "buyerEmail": buyer_email.strip(),
        "shippingAddress": shipping_address.strip(),
        "quantity": quantity,
        "totalPrice": order_total(product.price, quantity),
        "status": "pending",
    }


def _render_order_form(client: StorefrontClient, product: Product) -> None:
    st.subheader("Place an order")
    with st.form(f"order_{product.id}", clear_on_submit=True):
        buyer_name = st.text_input("Your name")
        buyer_email = st.text_input("Email")
        shipping_address = st.text_area("Shipping address")
        quantity = int(st.number_input("Quantity", min_value=1, value=1, step=1))
        st.markdown(f"**Total:** ${order_total(product.price, quantity):,.2f}")
        submitted = st.form_submit_button("Place order")

    if submitted:
        if not (buyer_name.strip() and buyer_email.strip() and shipping_address.strip()):
            st.error("Name, email, and shipping address are required")
            return
        order = client.create_order(build_order_payload(product, buyer_name, buyer_email, shipping_address, quantity))
        st.success(f"Order **{order.id}** placed for {order.quantity} × {order.product_name}")


def _render_edit_form(client: StorefrontClient, product: Product) -> None:
    with st.expander("✏️ Edit listing", expanded=False):
        with st.form(f"edit_{product.id}"):
            name = st.text_input("Name", value=product.name)
            description = st.text_area("Description", value=product.description)
            price = st.number_input("Price", min_value=0.0, value=float(product.price), step=0.01, format="%.2f")
            image_url = st.text_input("Image URL", value=product.image_url)
            seller = st.text_input("Seller", value=product.seller)
            submitted = st.form_submit_button("Save changes")

        if submitted:
            updated = client.update_product(
                product.id,
                {
                    "name": name.strip(),
                    "description": description,
                    "price": price,
                    "imageUrl": image_url.strip(),
                    "seller": seller.strip(),
                },
            )
            st.success(f"Saved **{updated.name}**")

        if st.button("Delete listing", key=f"delete_{product.id}"):
            client.delete_product(product.id)
            st.session_state.pop("selected_product_id", None)
            st.success("Listing deleted")


def render(client: StorefrontClient, product_id: Optional[str]) -> None:
    st.title("Product")

    if not product_id:
        st.info("Pick a product from the catalog.")
        return

    try:
        product = client.get_product(product_id)
    except NotFoundError:
        st.error(f"Product {product_id} not found")
        return
    if client.last_warning:
        st.warning(client.last_warning)

    left, right = st.columns([1, 1])
    with left:
        st.image(product.image_url or "https://placehold.co/300x200?text=No+image", use_container_width=True)
    with right:
        st.header(product.name)
        st.caption(f"Sold by {product.seller}")
        st.markdown(f"### ${product.price:,.2f}")
        st.write(product.description or "_No description_")

    st.divider()
    _render_order_form(client, product)
    _render_edit_form(client, product)
