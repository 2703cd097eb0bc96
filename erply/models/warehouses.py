"""Модель склада."""

from pydantic import Field

from erply.models.base import ErplyRecord


class Warehouse(ErplyRecord):
    """Склад / магазин (getWarehouses)."""

    warehouse_id: str = Field(default="", alias="warehouseID")
    pricelist_id: int = Field(default=0, alias="pricelistID")
    pricelist_id2: int = Field(default=0, alias="pricelistID2")
    pricelist_id3: int = Field(default=0, alias="pricelistID3")
    pricelist_id4: int = Field(default=0, alias="pricelistID4")
    pricelist_id5: int = Field(default=0, alias="pricelistID5")
    name: str = ""
    code: str = ""
    address_id: int = Field(default=0, alias="addressID")
    address: str = ""
    address2: str = ""
    street: str = ""
    zip_code: str = Field(default="", alias="ZIPcode")
    city: str = ""
    state: str = ""
    country: str = ""
    phone: str = ""
    fax: str = ""
    email: str = ""
    website: str = ""
    bank_name: str = Field(default="", alias="bankName")
    bank_account_number: str = Field(default="", alias="bankAccountNumber")
    iban: str = Field(default="", alias="iban")
    swift: str = Field(default="", alias="swift")
    company_name: str = Field(default="", alias="companyName")
    company_code: str = Field(default="", alias="companyCode")
    company_vat_number: str = Field(default="", alias="companyVatNumber")
    is_offline_inventory: int = Field(default=0, alias="isOfflineInventory")
    time_zone: str = Field(default="", alias="timeZone")
