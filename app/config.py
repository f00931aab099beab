from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens for the storefront UI.
# - Centralized here so components/styles.py only maps tokens -> CSS variables.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F7F6F2",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",        # product card surface
    # Accents
    "accent_primary": "#1F6FEB",
    "accent_secondary": "#388BFD",  # hover
    "navy_900": "#0B1220",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E6E4E0",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Order status colors
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#B42318",
}

DEFAULT_API_URL = "https://api.airtable.com/v0"
DEFAULT_PRODUCTS_TABLE = "Products"
DEFAULT_ORDERS_TABLE = "Orders"


@dataclass(frozen=True)
class AppConfig:
    # Required for "real data" mode (remote record store). If either is unset every
    # call is served from the mock dataset.
    airtable_api_key: Optional[str]
    airtable_base_id: Optional[str]

    # Per-resource table names as set in the environment (None = unset).
    # Unset also means "serve that resource from mock data".
    products_table: Optional[str]
    orders_table: Optional[str]

    airtable_api_url: str
    store_timeout_seconds: float

    # Storefront UI -> HTTP API
    api_base_url: str
    api_port: int

    # Defaults
    use_mock: bool
    log_level: str

    @property
    def store_configured(self) -> bool:
        return bool(self.airtable_api_key and self.airtable_base_id)

    def _table_override(self, kind: str) -> Optional[str]:
        if kind == "products":
            return self.products_table
        if kind == "orders":
            return self.orders_table
        raise ValueError(f"Unknown resource kind: {kind}")

    def table_name(self, kind: str) -> str:
        default = DEFAULT_PRODUCTS_TABLE if kind == "products" else DEFAULT_ORDERS_TABLE
        return self._table_override(kind) or default

    def table_configured(self, kind: str) -> bool:
        return self.store_configured and bool(self._table_override(kind))


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getfloat(name: str, default: float) -> float:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Blank values are treated as unset
    """
    load_dotenv(override=False)

    return AppConfig(
        airtable_api_key=_getenv("AIRTABLE_API_KEY"),
        airtable_base_id=_getenv("AIRTABLE_BASE_ID"),
        products_table=_getenv("AIRTABLE_PRODUCTS_TABLE"),
        orders_table=_getenv("AIRTABLE_ORDERS_TABLE"),
        airtable_api_url=_getenv("AIRTABLE_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL,
        store_timeout_seconds=_getfloat("STORE_TIMEOUT_SECONDS", 10.0),
        api_base_url=_getenv("STOREFRONT_API_URL", "http://localhost:8000/api") or "http://localhost:8000/api",
        api_port=int(_getfloat("PORT", 8000)),
        use_mock=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
