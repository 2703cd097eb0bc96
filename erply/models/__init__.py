"""Модели записей ERPLY API."""

from erply.models.addresses import Address
from erply.models.base import ErplyRecord
from erply.models.company import CompanyInfo
from erply.models.prices import (
    ChangeProductToSupplierPriceListResult,
    ObjAttribute,
    PriceList,
    PriceListRule,
    ProductPriceList,
)
from erply.models.products import (
    RESPONSE_TYPE_CSV,
    DeleteProductResult,
    Product,
    ProductBrand,
    ProductCategory,
    ProductDimension,
    ProductGroup,
    ProductImage,
    ProductStock,
    ProductStockFile,
    ProductUnit,
    ProductVariation,
    SaveProductResult,
    StockInfo,
)
from erply.models.servicediscovery import Endpoint, ServiceEndpoints
from erply.models.warehouses import Warehouse

__all__ = [
    "RESPONSE_TYPE_CSV",
    "Address",
    "ChangeProductToSupplierPriceListResult",
    "CompanyInfo",
    "DeleteProductResult",
    "Endpoint",
    "ErplyRecord",
    "ObjAttribute",
    "PriceList",
    "PriceListRule",
    "Product",
    "ProductBrand",
    "ProductCategory",
    "ProductDimension",
    "ProductGroup",
    "ProductImage",
    "ProductPriceList",
    "ProductStock",
    "ProductStockFile",
    "ProductUnit",
    "ProductVariation",
    "SaveProductResult",
    "ServiceEndpoints",
    "StockInfo",
    "Warehouse",
]
