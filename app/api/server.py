from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Request, status

from api.errors import guarded, install_error_handlers
from api.validation import validate_order_input, validate_order_update, validate_product_input
from config import AppConfig, get_config
from data import service
from logging_setup import configure_logging

log = logging.getLogger(__name__)

SERVICE_NAME = "marketplace-storefront-api"

router = APIRouter(prefix="/api")


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.cfg


# --- products -----------------------------------------------------------------

@router.get("/products")
def list_products(cfg: AppConfig = Depends(get_app_config)) -> Any:
    return guarded(
        "Failed to fetch products",
        lambda: [p.to_payload() for p in service.list_products(cfg).value],
    )


@router.post("/products", status_code=status.HTTP_201_CREATED)
def create_product(body: Any = Body(default=None), cfg: AppConfig = Depends(get_app_config)) -> Any:
    payload = validate_product_input(body)
    return guarded(
        "Failed to create product",
        lambda: service.create_product(cfg, payload).value.to_payload(),
    )


@router.get("/products/{product_id}")
def get_product(product_id: str, cfg: AppConfig = Depends(get_app_config)) -> Any:
    return guarded(
        "Failed to fetch product",
        lambda: service.get_product(cfg, product_id).value.to_payload(),
    )


@router.put("/products/{product_id}")
def update_product(
    product_id: str,
    body: Any = Body(default=None),
    cfg: AppConfig = Depends(get_app_config),
) -> Any:
    payload = validate_product_input(body)
    return guarded(
        "Failed to update product",
        lambda: service.update_product(cfg, product_id, payload).value.to_payload(),
    )


@router.delete("/products/{product_id}")
def delete_product(product_id: str, cfg: AppConfig = Depends(get_app_config)) -> Any:
    return guarded(
        "Failed to delete product",
        lambda: {"success": service.delete_product(cfg, product_id).value},
    )


# --- orders -------------------------------------------------------------------

@router.get("/orders")
def list_orders(cfg: AppConfig = Depends(get_app_config)) -> Any:
    return guarded(
        "Failed to fetch orders",
        lambda: [o.to_payload() for o in service.list_orders(cfg).value],
    )


@router.post("/orders", status_code=status.HTTP_201_CREATED)
def create_order(body: Any = Body(default=None), cfg: AppConfig = Depends(get_app_config)) -> Any:
    payload = validate_order_input(body)
    return guarded(
        "Failed to create order",
        lambda: service.create_order(cfg, payload).value.to_payload(),
    )


@router.get("/orders/{order_id}")
def get_order(order_id: str, cfg: AppConfig = Depends(get_app_config)) -> Any:
    return guarded(
        "Failed to fetch order",
        lambda: service.get_order(cfg, order_id).value.to_payload(),
    )


@router.put("/orders/{order_id}")
def update_order(
    order_id: str,
    body: Any = Body(default=None),
    cfg: AppConfig = Depends(get_app_config),
) -> Any:
    payload = validate_order_update(body)
    return guarded(
        "Failed to update order",
        lambda: service.update_order(cfg, order_id, payload).value.to_payload(),
    )


@router.get("/health")
def health(cfg: AppConfig = Depends(get_app_config)) -> dict[str, Any]:
    return {
        "service": SERVICE_NAME,
        "status": "ok",
        "store_configured": cfg.store_configured,
        "use_mock": cfg.use_mock,
    }


def create_app(cfg: Optional[AppConfig] = None) -> FastAPI:
    """Build the API app. `cfg` defaults to the environment (see config.get_config)."""
    cfg = cfg or get_config()
    configure_logging(cfg.log_level)
    if not cfg.store_configured:
        log.warning("Record store credentials not set; every request will be served from mock data")

    application = FastAPI(title=SERVICE_NAME)
    application.state.cfg = cfg
    install_error_handlers(application)
    application.include_router(router)
    return application
