"""Модель адреса."""

from pydantic import Field, field_validator

from erply.models.base import ErplyRecord
from erply.models.prices import ObjAttribute


class Address(ErplyRecord):
    """Адрес клиента, поставщика или склада (getAddresses, saveAddress)."""

    address_id: int = Field(default=0, alias="addressID")
    owner_id: int = Field(default=0, alias="ownerID")
    type_id: int = Field(default=0, alias="typeID")
    type_name: str = Field(default="", alias="typeName")
    type_active: int = Field(default=0, alias="typeActive")
    street: str = ""
    address2: str = ""
    city: str = ""
    postal_code: str = Field(default="", alias="postalCode")
    state: str = ""
    country: str = ""
    added: int = 0
    last_modified: int = Field(default=0, alias="lastModified")
    attributes: list[ObjAttribute] = Field(default_factory=list)

    @field_validator("attributes", mode="before")
    @classmethod
    def _null_attributes(cls, value: object) -> object:
        return [] if value is None else value
