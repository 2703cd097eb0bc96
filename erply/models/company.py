"""Модель информации о компании."""

from pydantic import Field

from erply.models.base import ErplyRecord


class CompanyInfo(ErplyRecord):
    """Реквизиты компании-владельца аккаунта (getCompanyInfo)."""

    name: str = ""
    code: str = ""
    vat: str = Field(default="", alias="VAT")
    phone: str = ""
    mobile: str = ""
    fax: str = ""
    email: str = ""
    web: str = ""
    bank_account_number: str = Field(default="", alias="bankAccountNumber")
    bank_name: str = Field(default="", alias="bankName")
    bank_swift: str = Field(default="", alias="bankSWIFT")
    bank_iban: str = Field(default="", alias="bankIBAN")
    bank_account_number2: str = Field(default="", alias="bankAccountNumber2")
    bank_name2: str = Field(default="", alias="bankName2")
    bank_swift2: str = Field(default="", alias="bankSWIFT2")
    bank_iban2: str = Field(default="", alias="bankIBAN2")
    address: str = ""
    country: str = ""
