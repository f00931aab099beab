from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import quote

import requests

from config import AppConfig
from data.errors import RecordNotFoundError, RemoteError, StoreConfigError

log = logging.getLogger(__name__)

# The store caps list pages at 100 records; we always ask for the max.
PAGE_SIZE = 100


@dataclass(frozen=True)
class RawRecord:
    """One row as the record store returns it: an id plus an untyped field map."""
    id: str
    fields: dict[str, Any] = field(default_factory=dict)
    created_time: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "RawRecord":
        if not isinstance(data, dict) or "id" not in data:
            raise RemoteError("Malformed record in store response")
        return cls(
            id=str(data["id"]),
            fields=dict(data.get("fields") or {}),
            created_time=str(data.get("createdTime") or ""),
        )


@dataclass(frozen=True)
class TableHandle:
    """
    find / list / create / update / destroy against one named table.

    Every call is a single HTTP request. 404s raise RecordNotFoundError; any
    other failure raises RemoteError.
    """
    base_url: str
    table_name: str
    headers: dict[str, str]
    timeout: float

    @property
    def _table_url(self) -> str:
        return f"{self.base_url}/{quote(self.table_name, safe='')}"

    def _record_url(self, record_id: str) -> str:
        return f"{self._table_url}/{quote(record_id, safe='')}"

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            resp = requests.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise RemoteError(f"{method} {self.table_name} failed: {type(e).__name__}") from e

        if resp.status_code == 404:
            raise RecordNotFoundError(f"No record at {url}")
        if resp.status_code >= 300:
            raise RemoteError(
                f"{method} {self.table_name} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise RemoteError(f"{method} {self.table_name} returned a non-JSON body") from e

    def find(self, record_id: str) -> RawRecord:
        return RawRecord.from_json(self._request("GET", self._record_url(record_id)))

    def list_all(self) -> list[RawRecord]:
        records: list[RawRecord] = []
        offset: Optional[str] = None
        while True:
            params: dict[str, Any] = {"pageSize": PAGE_SIZE}
            if offset:
                params["offset"] = offset
            data = self._request("GET", self._table_url, params=params)
            records.extend(RawRecord.from_json(r) for r in data.get("records", []))
            offset = data.get("offset")
            if not offset:
                return records

    def create(self, fields: dict[str, Any]) -> RawRecord:
        return RawRecord.from_json(self._request("POST", self._table_url, json={"fields": fields}))

    def update(self, record_id: str, fields: dict[str, Any]) -> RawRecord:
        # PATCH only touches the fields we send
        return RawRecord.from_json(
            self._request("PATCH", self._record_url(record_id), json={"fields": fields})
        )

    def destroy(self, record_id: str) -> None:
        self._request("DELETE", self._record_url(record_id))


@dataclass(frozen=True)
class RecordStore:
    cfg: AppConfig

    def open_table(self, kind: str) -> TableHandle:
        """
        Returns a handle on the table backing `kind` ("products" | "orders").
        Fails fast with StoreConfigError rather than calling out with partial credentials.
        """
        if not self.cfg.airtable_api_key or not self.cfg.airtable_base_id:
            raise StoreConfigError(
                "Missing AIRTABLE_API_KEY or AIRTABLE_BASE_ID for record store access."
            )
        table_name = self.cfg.table_name(kind)
        log.debug("Opening record store table %s", table_name)
        return TableHandle(
            base_url=f"{self.cfg.airtable_api_url.rstrip('/')}/{self.cfg.airtable_base_id}",
            table_name=table_name,
            headers={
                "Authorization": f"Bearer {self.cfg.airtable_api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.cfg.store_timeout_seconds,
        )


def get_record_store(cfg: AppConfig) -> RecordStore:
    return RecordStore(cfg=cfg)
