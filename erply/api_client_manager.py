"""Фасад ERPLY API.

Каждый метод — один вызов API: собрать параметры, отправить запрос,
разобрать ответ, проверить статус, вернуть типизированные записи.
Bulk-методы отправляют несколько подзапросов одним HTTP-запросом.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, TypeVar

import aiohttp

from erply.bulk import BulkRequest, BulkResponse
from erply.config_reader import ErplyConfig
from erply.exceptions import ErplyException
from erply.models.addresses import Address
from erply.models.company import CompanyInfo
from erply.models.prices import (
    ChangeProductToSupplierPriceListResult,
    PriceList,
    ProductPriceList,
)
from erply.models.products import (
    RESPONSE_TYPE_CSV,
    DeleteProductResult,
    Product,
    ProductBrand,
    ProductCategory,
    ProductGroup,
    ProductStock,
    ProductStockFile,
    ProductUnit,
    SaveProductResult,
)
from erply.models.servicediscovery import ServiceEndpoints
from erply.models.warehouses import Warehouse
from erply.responses import call
from erply.transport import DEFAULT_TIMEOUT, ClientConfig, Transport

logger = logging.getLogger(__name__)
logger.setLevel(level=logging.DEBUG)

T = TypeVar("T")

Filters = Mapping[str, Any]
BulkFilters = Sequence[Mapping[str, Any]]


class ErplyApiClientManager:
    """Фасад для работы с ERPLY API.

    Содержит: Transport (HTTP-сессия aiohttp).
    Предоставляет типизированные методы для работы с API.

    Использование:
        async with ErplyApiClientManager.from_config(config) as manager:
            products = await manager.get_products({"recordsOnPage": 100})
    """

    def __init__(
        self,
        config: ClientConfig,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Инициализация менеджера.

        Args:
            config: Настройки подключения
            session: Внешняя HTTP-сессия (не закрывается менеджером)
            timeout: Таймаут HTTP-запроса в секундах
        """
        self._config = config
        self._transport = Transport(config, session=session, timeout=timeout)
        logger.debug(
            "Создан экземпляр ErplyApiClientManager для client_code=%s",
            config.client_code,
        )

    @classmethod
    def from_config(
        cls,
        config: ErplyConfig,
        session: aiohttp.ClientSession | None = None,
    ) -> "ErplyApiClientManager":
        """Создать экземпляр из конфигурации ERPLY.

        Args:
            config: Конфигурация ERPLY из YAML-файла
            session: Внешняя HTTP-сессия (опционально)

        Returns:
            Экземпляр ErplyApiClientManager
        """
        return cls(
            config=config.to_client_config(),
            session=session,
            timeout=config.timeout,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    async def close(self) -> None:
        """Закрыть HTTP-сессию."""
        await self._transport.close()
        logger.debug("Закрыто соединение для client_code=%s", self._config.client_code)

    async def __aenter__(self) -> "ErplyApiClientManager":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def execute(self, verb: str, api_call: Callable[[], Awaitable[T]]) -> T:
        """Выполнить API-вызов и залогировать ошибку.

        Повторных попыток нет: любая ошибка сразу пробрасывается.

        Args:
            verb: Имя метода API (для лога)
            api_call: Асинхронная функция вызова API

        Returns:
            Результат вызова
        """
        try:
            return await api_call()
        except ErplyException as exc:
            logger.error("Ошибка ERPLY API (%s): %s", verb, exc)
            raise

    async def _call(
        self,
        verb: str,
        filters: Filters | None,
        record_type: type[T],
        require_records: bool = False,
    ) -> list[T]:
        async def api_call() -> list[T]:
            return await call(
                self._transport,
                verb,
                filters,
                record_type,
                require_records=require_records,
            )

        return await self.execute(verb, api_call)

    async def _call_bulk(
        self,
        verb: str,
        bulk_filters: BulkFilters,
        base_filters: Filters | None,
        record_type: type[T],
        require_records: bool = False,
    ) -> BulkResponse[T]:
        engine = BulkRequest(verb, record_type)

        async def api_call() -> BulkResponse[T]:
            return await engine.call(
                self._transport,
                bulk_filters,
                base_filters,
                require_records=require_records,
            )

        return await self.execute(verb, api_call)

    # ========== Товары ==========

    async def get_products(self, filters: Filters | None = None) -> list[Product]:
        """Получить список товаров.

        Args:
            filters: Параметры getProducts (productID, code, recordsOnPage и др.)

        Returns:
            Список товаров (пустой, если ничего не найдено)
        """
        return await self._call("getProducts", filters, Product)

    async def get_products_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[Product]:
        """Получить товары несколькими подзапросами за один HTTP-запрос.

        Удобно для выборки больше лимита одной страницы: по подзапросу
        на страницу (pageNo).

        Args:
            bulk_filters: Параметры подзапросов getProducts
            base_filters: Общие параметры bulk-запроса

        Returns:
            Ответ с элементами в порядке подзапросов
        """
        return await self._call_bulk("getProducts", bulk_filters, base_filters, Product)

    async def save_product(self, filters: Filters) -> SaveProductResult:
        """Создать или изменить товар.

        Args:
            filters: Параметры saveProduct

        Returns:
            Результат сохранения с ID товара

        Raises:
            EmptyResultError: Если API не вернул результат сохранения
        """
        results = await self._call(
            "saveProduct", filters, SaveProductResult, require_records=True
        )
        return results[0]

    async def save_product_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[SaveProductResult]:
        """Сохранить несколько товаров одним запросом.

        Каждый подзапрос обязан вернуть результат сохранения.
        """
        return await self._call_bulk(
            "saveProduct",
            bulk_filters,
            base_filters,
            SaveProductResult,
            require_records=True,
        )

    async def delete_product(self, filters: Filters) -> None:
        """Удалить товар.

        Args:
            filters: Параметры deleteProduct (productID)
        """
        await self._call("deleteProduct", filters, DeleteProductResult)

    async def delete_product_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[DeleteProductResult]:
        """Удалить несколько товаров одним запросом."""
        return await self._call_bulk(
            "deleteProduct", bulk_filters, base_filters, DeleteProductResult
        )

    async def get_product_units(
        self, filters: Filters | None = None
    ) -> list[ProductUnit]:
        """Получить единицы измерения товаров."""
        return await self._call("getProductUnits", filters, ProductUnit)

    async def get_product_categories(
        self, filters: Filters | None = None
    ) -> list[ProductCategory]:
        """Получить категории товаров."""
        return await self._call("getProductCategories", filters, ProductCategory)

    async def get_product_brands(
        self, filters: Filters | None = None
    ) -> list[ProductBrand]:
        """Получить бренды товаров (getProductBrands)."""
        return await self._call("getProductBrands", filters, ProductBrand)

    async def get_brands(self, filters: Filters | None = None) -> list[ProductBrand]:
        """Получить бренды (getBrands)."""
        return await self._call("getBrands", filters, ProductBrand)

    async def get_product_groups(
        self, filters: Filters | None = None
    ) -> list[ProductGroup]:
        """Получить дерево групп товаров."""
        return await self._call("getProductGroups", filters, ProductGroup)

    async def get_product_stock(
        self, filters: Filters | None = None
    ) -> list[ProductStock]:
        """Получить остатки товаров.

        Args:
            filters: Параметры getProductStock (warehouseID и др.)

        Returns:
            Список остатков
        """
        return await self._call("getProductStock", filters, ProductStock)

    async def get_product_stock_file(
        self, filters: Filters | None = None
    ) -> list[ProductStockFile]:
        """Получить остатки ссылкой на CSV-файл.

        responseType=CSV выставляется всегда, даже если в filters
        передано другое значение.

        Returns:
            Список ссылок на файлы
        """
        stock_filters = dict(filters or {})
        stock_filters["responseType"] = RESPONSE_TYPE_CSV
        return await self._call("getProductStock", stock_filters, ProductStockFile)

    async def get_product_stock_file_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[ProductStockFile]:
        """Получить несколько CSV-файлов остатков одним запросом."""
        stock_filters = dict(base_filters or {})
        stock_filters["responseType"] = RESPONSE_TYPE_CSV
        return await self._call_bulk(
            "getProductStock", bulk_filters, stock_filters, ProductStockFile
        )

    # ========== Прайс-листы поставщиков ==========

    async def get_supplier_price_lists(
        self, filters: Filters | None = None
    ) -> list[PriceList]:
        """Получить прайс-листы поставщиков."""
        return await self._call("getSupplierPriceLists", filters, PriceList)

    async def get_supplier_price_lists_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[PriceList]:
        """Получить прайс-листы поставщиков несколькими подзапросами."""
        return await self._call_bulk(
            "getSupplierPriceLists", bulk_filters, base_filters, PriceList
        )

    async def get_products_in_supplier_price_list(
        self, filters: Filters | None = None
    ) -> list[ProductPriceList]:
        """Получить товары прайс-листа поставщика.

        Args:
            filters: Параметры (supplierPriceListID и др.)

        Returns:
            Список позиций прайс-листа
        """
        return await self._call(
            "getProductsInSupplierPriceList", filters, ProductPriceList
        )

    async def get_products_in_supplier_price_list_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[ProductPriceList]:
        """Получить товары нескольких прайс-листов одним запросом."""
        return await self._call_bulk(
            "getProductsInSupplierPriceList",
            bulk_filters,
            base_filters,
            ProductPriceList,
        )

    async def add_product_to_supplier_price_list(
        self, filters: Filters
    ) -> ChangeProductToSupplierPriceListResult:
        """Добавить товар в прайс-лист поставщика.

        Raises:
            EmptyResultError: Если API не вернул ID позиции
        """
        results = await self._call(
            "addProductToSupplierPriceList",
            filters,
            ChangeProductToSupplierPriceListResult,
            require_records=True,
        )
        return results[0]

    async def add_product_to_supplier_price_list_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[ChangeProductToSupplierPriceListResult]:
        """Добавить несколько товаров в прайс-листы одним запросом."""
        return await self._call_bulk(
            "addProductToSupplierPriceList",
            bulk_filters,
            base_filters,
            ChangeProductToSupplierPriceListResult,
            require_records=True,
        )

    async def edit_product_in_supplier_price_list(
        self, filters: Filters
    ) -> ChangeProductToSupplierPriceListResult:
        """Изменить товар в прайс-листе поставщика.

        Raises:
            EmptyResultError: Если API не вернул ID позиции
        """
        results = await self._call(
            "editProductInSupplierPriceList",
            filters,
            ChangeProductToSupplierPriceListResult,
            require_records=True,
        )
        return results[0]

    async def edit_product_in_supplier_price_list_bulk(
        self, bulk_filters: BulkFilters, base_filters: Filters | None = None
    ) -> BulkResponse[ChangeProductToSupplierPriceListResult]:
        """Изменить несколько позиций прайс-листов одним запросом."""
        return await self._call_bulk(
            "editProductInSupplierPriceList",
            bulk_filters,
            base_filters,
            ChangeProductToSupplierPriceListResult,
            require_records=True,
        )

    # ========== Адреса ==========

    async def get_addresses(self, filters: Filters | None = None) -> list[Address]:
        """Получить адреса.

        Args:
            filters: Параметры getAddresses (ownerID, typeID и др.)

        Returns:
            Список адресов
        """
        return await self._call("getAddresses", filters, Address)

    async def save_address(self, filters: Filters) -> list[Address]:
        """Создать или изменить адрес.

        Returns:
            Сохранённые адреса (минимум один)

        Raises:
            EmptyResultError: Если API не вернул сохранённый адрес
        """
        return await self._call("saveAddress", filters, Address, require_records=True)

    # ========== Склады ==========

    async def get_warehouses(self, filters: Filters | None = None) -> list[Warehouse]:
        """Получить склады (магазины) аккаунта."""
        return await self._call("getWarehouses", filters, Warehouse)

    # ========== Компания ==========

    async def get_company_info(self, filters: Filters | None = None) -> CompanyInfo:
        """Получить реквизиты компании.

        Raises:
            EmptyResultError: Если API не вернул ни одной записи
        """
        records = await self._call(
            "getCompanyInfo", filters, CompanyInfo, require_records=True
        )
        return records[0]

    # ========== Адреса сервисов ==========

    async def get_service_endpoints(
        self, filters: Filters | None = None
    ) -> ServiceEndpoints:
        """Получить адреса микросервисов ERPLY для аккаунта.

        Raises:
            EmptyResultError: Если API не вернул ни одной записи
        """
        records = await self._call(
            "getServiceEndpoints", filters, ServiceEndpoints, require_records=True
        )
        return records[0]
