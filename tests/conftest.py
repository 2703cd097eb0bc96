"""Общие фикстуры для тестов erply.

Содержит фикстуры, используемые в различных тестовых модулях.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator, Callable
from os import getenv
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from erply import (
    ClientConfig,
    ErplyApiClientManager,
    Transport,
    get_erply_config,
)


def build_status(
    request: str = "getProducts",
    response_status: str = "ok",
    error_code: int | str = 0,
    **extra: Any,
) -> dict[str, Any]:
    """Собрать статус ответа в формате API."""
    return {
        "request": request,
        "requestUnixTime": 1700000000,
        "responseStatus": response_status,
        "errorCode": error_code,
        "generationTime": 0.01,
        **extra,
    }


def build_body(
    records: list[dict[str, Any]] | None = None,
    request: str = "getProducts",
    response_status: str = "ok",
    error_code: int | str = 0,
) -> bytes:
    """Собрать тело ответа одиночного запроса."""
    return json.dumps(
        {
            "status": build_status(request, response_status, error_code),
            "records": records,
        }
    ).encode()


def build_bulk_item(
    records: list[dict[str, Any]] | None = None,
    request_name: str = "getProducts",
    response_status: str = "ok",
    error_code: int | str = 0,
    request_id: int | None = None,
) -> dict[str, Any]:
    """Собрать элемент bulk-ответа."""
    status: dict[str, Any] = {
        "requestName": request_name,
        "responseStatus": response_status,
        "errorCode": error_code,
    }
    if request_id is not None:
        status["requestID"] = request_id
    return {"status": status, "records": records}


def build_bulk_body(
    items: list[dict[str, Any]] | None,
    response_status: str = "ok",
    error_code: int | str = 0,
) -> bytes:
    """Собрать тело bulk-ответа."""
    body: dict[str, Any] = {
        "status": build_status("", response_status, error_code),
    }
    if items is not None:
        body["requests"] = items
    return json.dumps(body).encode()


def make_session(status: int = 200, body: bytes = b"{}") -> MagicMock:
    """Создать мок aiohttp.ClientSession с заданным ответом."""
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)

    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.post.return_value.__aenter__.return_value = response
    session.post.return_value.__aexit__.return_value = False
    return session


# ========== Unit-фикстуры ==========


@pytest.fixture
def client_config() -> ClientConfig:
    """Настройки подключения к тестовому аккаунту."""
    return ClientConfig(client_code="123456", session_key="test-session-key")


@pytest.fixture
def fake_transport(client_config: ClientConfig) -> MagicMock:
    """Мок транспорта: send/send_bulk возвращают заданные тела ответов."""
    transport = MagicMock(spec=Transport)
    transport.config = client_config
    transport.send = AsyncMock(return_value=build_body([]))
    transport.send_bulk = AsyncMock(return_value=build_bulk_body([]))
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def erply_manager(
    client_config: ClientConfig, fake_transport: MagicMock
) -> ErplyApiClientManager:
    """Менеджер, работающий через мок транспорта."""
    mgr = ErplyApiClientManager(client_config)
    mgr._transport = fake_transport
    return mgr


@pytest.fixture
def product_record() -> dict[str, Any]:
    """Товар в том виде, в каком его отдаёт getProducts."""
    return {
        "productID": 1001,
        "parentProductID": 0,
        "type": "PRODUCT",
        "name": "Кофе в зёрнах 1 кг",
        "code": "4740000000011",
        "code2": 4740000000028,
        "code3": None,
        "price": "12.50",
        "priceWithVat": 15.13,
        "unitName": "kg",
        "displayedInWebshop": 1,
        "categoryID": 3,
        "categoryName": "Кофе",
        "brandID": 0,
        "brandName": "",
        "groupID": 7,
        "groupName": "Напитки",
        "vatrate": "21",
        "images": [
            {
                "pictureID": 55,
                "name": "coffee.jpg",
                "fullURL": "https://cdn.example.com/coffee.jpg",
                "external": 0,
            }
        ],
        "warehouses": {
            "1": {
                "warehouseID": 1,
                "free": 10,
                "orderPending": 0,
                "reorderPoint": 2,
                "restockLevel": 20,
                "FIFOCost": 8.4,
                "purchasePrice": 8.0,
            }
        },
        "relatedProducts": [],
        "productVariations": [],
        "variationList": None,
        "added": 1600000000,
    }


# ========== Интеграционные фикстуры ==========


@pytest.fixture
async def manager() -> AsyncGenerator[ErplyApiClientManager, None]:
    """Создать менеджер из реальной конфигурации."""
    if getenv("ERPLY_CONFIG") is None:
        pytest.skip("ERPLY_CONFIG не задан")

    config = get_erply_config()
    mgr = ErplyApiClientManager.from_config(config)
    yield mgr
    # Cleanup после каждого теста
    await mgr.close()


@pytest.fixture
def body_factory() -> Callable[..., bytes]:
    """Фабрика тел одиночных ответов."""
    return build_body


@pytest.fixture
def bulk_body_factory() -> Callable[..., bytes]:
    """Фабрика тел bulk-ответов."""
    return build_bulk_body


@pytest.fixture
def bulk_item_factory() -> Callable[..., dict[str, Any]]:
    """Фабрика элементов bulk-ответа."""
    return build_bulk_item


@pytest.fixture
def session_factory() -> Callable[..., MagicMock]:
    """Фабрика моков aiohttp-сессии."""
    return make_session
