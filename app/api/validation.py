"""
Request body models for the resource handlers.

Bodies arrive as raw JSON (`Body(default=None)`) and are checked here so the
two "required fields" messages keep their exact wording; every other problem
is reported as `<field>: <reason>`. All failures surface as `ValidationError`
(400).
"""
from __future__ import annotations

from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from data.errors import ValidationError
from data.models import OrderStatus

PRODUCT_REQUIRED_MSG = "Name, price, and seller are required"
ORDER_REQUIRED_MSG = "Product ID, buyer name, email, and shipping address are required"
NOT_AN_OBJECT_MSG = "Request body must be a JSON object"

# pydantic error types that mean "a required field was not given"
_ABSENT_TYPES = {"missing", "string_too_short"}


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _no_booleans(cls, v: Any) -> Any:
        # JSON true/false would otherwise coerce to 1/0
        if isinstance(v, bool):
            raise ValueError("must not be a boolean")
        return v


class ProductIn(_Body):
    """Create and update share this model: products are always written whole."""
    name: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    seller: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class OrderUpdate(_Body):
    product_name: Optional[str] = Field(default=None, alias="productName")
    buyer_name: Optional[str] = Field(default=None, alias="buyerName")
    buyer_email: Optional[str] = Field(default=None, alias="buyerEmail")
    shipping_address: Optional[str] = Field(default=None, alias="shippingAddress")
    quantity: Optional[int] = Field(default=None, ge=1)
    total_price: Optional[float] = Field(default=None, alias="totalPrice", ge=0, allow_inf_nan=False)
    status: Optional[OrderStatus] = None


class OrderIn(OrderUpdate):
    product_id: str = Field(alias="productId", min_length=1)
    buyer_name: str = Field(alias="buyerName", min_length=1)
    buyer_email: str = Field(alias="buyerEmail", min_length=1)
    shipping_address: str = Field(alias="shippingAddress", min_length=1)


def _is_absent(error: dict[str, Any], required: set[str]) -> bool:
    loc = error.get("loc") or ()
    if not loc or loc[0] not in required:
        return False
    return error["type"] in _ABSENT_TYPES or error.get("input") is None


def _parse(model: type[_Body], body: Any, required_msg: Optional[str] = None) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError(NOT_AN_OBJECT_MSG)
    try:
        parsed = model.model_validate(body)
    except pydantic.ValidationError as e:
        errors = e.errors()
        if required_msg:
            required = {f.alias or name for name, f in model.model_fields.items() if f.is_required()}
            if any(_is_absent(err, required) for err in errors):
                raise ValidationError(required_msg) from None
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise ValidationError(f"{field}: {first['msg']}") from None
    return parsed.model_dump(mode="json", by_alias=True, exclude_none=True)


def validate_product_input(body: Any) -> dict[str, Any]:
    return _parse(ProductIn, body, PRODUCT_REQUIRED_MSG)


def validate_order_input(body: Any) -> dict[str, Any]:
    return _parse(OrderIn, body, ORDER_REQUIRED_MSG)


def validate_order_update(body: Any) -> dict[str, Any]:
    """Every field optional; only the ones present are written."""
    return _parse(OrderUpdate, body)
