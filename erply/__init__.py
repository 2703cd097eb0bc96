"""Модуль для работы с ERPLY API.

Предоставляет типизированного клиента с одиночными и bulk-запросами.

Пример использования:
    from erply import ErplyApiClientManager, get_erply_config

    config = get_erply_config()
    async with ErplyApiClientManager.from_config(config) as manager:
        products = await manager.get_products({"recordsOnPage": 100})

        # Bulk: несколько страниц одним HTTP-запросом
        response = await manager.get_products_bulk(
            [{"pageNo": 1}, {"pageNo": 2}],
            {"recordsOnPage": 100},
        )
        all_products = response.records()
"""

from erply.api_client_manager import ErplyApiClientManager
from erply.bulk import BulkInput, BulkItem, BulkRequest, BulkResponse, build_inputs
from erply.config_reader import (
    ErplyConfig,
    get_config,
    get_erply_config,
    parse_config_file,
)
from erply.exceptions import (
    ApiError,
    DecodeError,
    EmptyResultError,
    ErplyException,
    TransportError,
)
from erply.responses import Response, call, decode_response
from erply.status import BulkItemStatus, ErrorCode, Status, check_status, is_ok
from erply.transport import MAX_BULK_REQUESTS, ClientConfig, Transport

__all__ = [
    # API Client Manager
    "ErplyApiClientManager",
    # Configuration
    "ClientConfig",
    "ErplyConfig",
    "get_config",
    "get_erply_config",
    "parse_config_file",
    # Exceptions
    "ApiError",
    "DecodeError",
    "EmptyResultError",
    "ErplyException",
    "TransportError",
    # Status
    "BulkItemStatus",
    "ErrorCode",
    "Status",
    "check_status",
    "is_ok",
    # Requests
    "MAX_BULK_REQUESTS",
    "Response",
    "Transport",
    "call",
    "decode_response",
    # Bulk
    "BulkInput",
    "BulkItem",
    "BulkRequest",
    "BulkResponse",
    "build_inputs",
]
