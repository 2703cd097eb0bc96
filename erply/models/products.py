"""Модели товаров, категорий, брендов, групп и остатков."""

from __future__ import annotations

from pydantic import Field, field_validator

from erply.models.base import ErplyRecord, empty_list_to_dict

# Значение responseType для ответа ссылкой на CSV-файл
RESPONSE_TYPE_CSV = "CSV"


class ProductDimension(ErplyRecord):
    name: str = ""
    value: str = ""
    order: int = 0
    dimension_id: int = Field(default=0, alias="dimensionID")
    dimension_value_id: int = Field(default=0, alias="dimensionValueID")


class ProductVariation(ErplyRecord):
    product_id: str = Field(default="", alias="productID")
    name: str = ""
    code: str = ""
    code2: str = ""
    dimensions: list[ProductDimension] = Field(default_factory=list)


class StockInfo(ErplyRecord):
    """Остаток товара на складе."""

    warehouse_id: int = Field(default=0, alias="warehouseID")
    free: float = 0
    order_pending: float = Field(default=0, alias="orderPending")
    reorder_point: float = Field(default=0, alias="reorderPoint")
    restock_level: float = Field(default=0, alias="restockLevel")
    fifo_cost: float = Field(default=0, alias="FIFOCost")
    purchase_price: float = Field(default=0, alias="purchasePrice")


class ProductImage(ErplyRecord):
    picture_id: str = Field(default="", alias="pictureID")
    name: str = ""
    thumb_url: str = Field(default="", alias="thumbURL")
    small_url: str = Field(default="", alias="smallURL")
    large_url: str = Field(default="", alias="largeURL")
    full_url: str = Field(default="", alias="fullURL")
    external: int = 0
    hosting_provider: str = Field(default="", alias="hostingProvider")
    hash: str | None = None
    tenant: str | None = None


class Product(ErplyRecord):
    """Товар (getProducts)."""

    product_id: int = Field(default=0, alias="productID")
    parent_product_id: int = Field(default=0, alias="parentProductID")
    type: str = ""
    name: str = ""
    description: str = ""
    description_long: str = Field(default="", alias="longdesc")
    status: str = ""
    code: str = ""
    code2: str = ""
    code3: str | None = None
    price: float = 0
    price_with_vat: float = Field(default=0, alias="priceWithVat")
    unit_name: str | None = Field(default=None, alias="unitName")
    images: list[ProductImage] = Field(default_factory=list)
    displayed_in_webshop: int = Field(default=0, alias="displayedInWebshop")
    category_id: int = Field(default=0, alias="categoryID")
    category_name: str = Field(default="", alias="categoryName")
    brand_id: int = Field(default=0, alias="brandID")
    brand_name: str = Field(default="", alias="brandName")
    group_id: int = Field(default=0, alias="groupID")
    group_name: str = Field(default="", alias="groupName")
    warehouses: dict[int, StockInfo] = Field(default_factory=dict)
    related_products: list[str] = Field(default_factory=list, alias="relatedProducts")
    vatrate: float = 0
    # варианты матричного товара
    product_variations: list[str] = Field(default_factory=list, alias="productVariations")
    variation_list: list[ProductVariation] = Field(
        default_factory=list, alias="variationList"
    )

    @field_validator("warehouses", mode="before")
    @classmethod
    def _warehouses(cls, value: object) -> object:
        return empty_list_to_dict(value)

    @field_validator(
        "images", "related_products", "product_variations", "variation_list",
        mode="before",
    )
    @classmethod
    def _null_list(cls, value: object) -> object:
        return [] if value is None else value


class ProductUnit(ErplyRecord):
    unit_id: str = Field(default="", alias="unitID")
    name: str = ""


class ProductCategory(ErplyRecord):
    product_category_id: int = Field(default=0, alias="productCategoryID")
    parent_category_id: int = Field(default=0, alias="parentCategoryID")
    product_category_name: str = Field(default="", alias="productCategoryName")
    added: int = 0
    last_modified: int = Field(default=0, alias="lastModified")


class ProductBrand(ErplyRecord):
    id: int = Field(default=0, alias="brandID")
    name: str = ""
    added: int = 0
    last_modified: int = Field(default=0, alias="lastModified")


class ProductGroup(ErplyRecord):
    """Группа товаров с вложенными подгруппами."""

    id: int = Field(default=0, alias="productGroupID")
    name: str = ""
    show_in_webshop: str = Field(default="", alias="showInWebshop")
    non_discountable: int = Field(default=0, alias="nonDiscountable")
    position_no: int = Field(default=0, alias="positionNo")
    parent_group_id: str = Field(default="", alias="parentGroupID")
    added: int = 0
    last_modified: int = Field(default=0, alias="lastModified")
    sub_groups: list[ProductGroup] = Field(default_factory=list, alias="subGroups")

    @field_validator("sub_groups", mode="before")
    @classmethod
    def _null_sub_groups(cls, value: object) -> object:
        return [] if value is None else value


class ProductStock(ErplyRecord):
    """Остаток товара (getProductStock)."""

    product_id: int = Field(default=0, alias="productID")
    amount_in_stock: float = Field(default=0, alias="amountInStock")
    amount_reserved: float = Field(default=0, alias="amountReserved")
    suggested_purchase_price: float = Field(default=0, alias="suggestedPurchasePrice")
    average_purchase_price: float = Field(default=0, alias="averagePurchasePrice")
    average_cost: float = Field(default=0, alias="averageCost")
    first_purchase_date: str = Field(default="", alias="firstPurchaseDate")
    last_purchase_date: str = Field(default="", alias="lastPurchaseDate")
    last_sold_date: str = Field(default="", alias="lastSoldDate")


class ProductStockFile(ErplyRecord):
    """Ссылка на CSV-файл с остатками (getProductStock с responseType=CSV)."""

    report_link: str = Field(default="", alias="reportLink")


class SaveProductResult(ErplyRecord):
    product_id: int = Field(default=0, alias="productID")
    already_exists: bool = Field(default=False, alias="alreadyExists")


class DeleteProductResult(ErplyRecord):
    """Запись ответа deleteProduct (API её обычно не присылает)."""

    product_id: int = Field(default=0, alias="productID")
