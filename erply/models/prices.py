"""Модели прайс-листов поставщиков."""

from pydantic import Field, field_validator

from erply.models.base import ErplyRecord


class ObjAttribute(ErplyRecord):
    """Произвольный атрибут объекта."""

    attribute_name: str = Field(default="", alias="attributeName")
    attribute_type: str = Field(default="", alias="attributeType")
    attribute_value: str = Field(default="", alias="attributeValue")


class PriceListRule(ErplyRecord):
    product_id: int = Field(default=0, alias="productID")
    price: float = 0
    amount: float = 0


class PriceList(ErplyRecord):
    """Прайс-лист поставщика (getSupplierPriceLists)."""

    id: int = Field(default=0, alias="supplierPriceListID")
    supplier_id: int = Field(default=0, alias="supplierID")
    supplier_name: str = Field(default="", alias="supplierName")
    name: str = ""
    valid_from: str = Field(default="", alias="startDate")
    valid_to: str = Field(default="", alias="endDate")
    active: str = ""
    added: int = 0
    last_modified: int = Field(default=0, alias="lastModified")
    added_by_user_name: str = Field(default="", alias="addedByUserName")
    last_modified_by_user_name: str = Field(default="", alias="lastModifiedByUserName")
    rules: list[PriceListRule] = Field(default_factory=list, alias="pricelistRules")
    attributes: list[ObjAttribute] = Field(default_factory=list)

    @field_validator("rules", "attributes", mode="before")
    @classmethod
    def _null_list(cls, value: object) -> object:
        return [] if value is None else value


class ProductPriceList(ErplyRecord):
    """Товар в прайс-листе поставщика (getProductsInSupplierPriceList)."""

    price_id: int = Field(default=0, alias="supplierPriceListProductID")
    product_id: int = Field(default=0, alias="productID")
    price: float = 0
    amount: float = 0
    country_id: int = Field(default=0, alias="countryID")
    product_supplier_code: str = Field(default="", alias="supplierCode")
    import_code: str = Field(default="", alias="importCode")
    master_pack_quantity: float = Field(default=0, alias="masterPackQuantity")
    minimum_order_quantity: float = Field(default=0, alias="minimumOrderQuantity")


class ChangeProductToSupplierPriceListResult(ErplyRecord):
    """Результат добавления/изменения товара в прайс-листе поставщика."""

    product_id: int = Field(default=0, alias="supplierPriceListProductID")
