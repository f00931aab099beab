"""Shared fixtures: configs, a fake `requests.request`, and an API test client."""

from __future__ import annotations

from typing import Callable

import pytest
import requests
from faker import Faker
from fastapi.testclient import TestClient

from api.server import create_app
from config import AppConfig
from tests.fakes import BASE_ID, STORE_URL, FakeHttp, make_config


@pytest.fixture
def unconfigured_cfg() -> AppConfig:
    return make_config()


@pytest.fixture
def configured_cfg() -> AppConfig:
    return make_config(airtable_api_key="key-123", airtable_base_id=BASE_ID)


@pytest.fixture
def fake_http(monkeypatch) -> FakeHttp:
    fake = FakeHttp()
    monkeypatch.setattr(requests, "request", fake)
    return fake


@pytest.fixture
def table_url() -> Callable[[str], str]:
    return lambda table: f"{STORE_URL}/{BASE_ID}/{table}"


@pytest.fixture
def unconfigured_api(unconfigured_cfg) -> TestClient:
    return TestClient(create_app(unconfigured_cfg))


@pytest.fixture
def configured_api(configured_cfg) -> TestClient:
    return TestClient(create_app(configured_cfg))


@pytest.fixture
def fake() -> Faker:
    Faker.seed(1234)
    return Faker()


@pytest.fixture
def buyer(fake: Faker) -> dict[str, str]:
    return {
        "buyerName": fake.name(),
        "buyerEmail": fake.email(),
        "shippingAddress": fake.address().replace("\n", ", "),
    }
