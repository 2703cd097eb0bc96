"""Модели адресов сервисов ERPLY (getServiceEndpoints)."""

from pydantic import Field

from erply.models.base import ErplyRecord


class Endpoint(ErplyRecord):
    is_sandbox: bool = Field(default=False, alias="isSandbox")
    url: str = ""
    documentation: str = ""


class ServiceEndpoints(ErplyRecord):
    """Таблица адресов микросервисов аккаунта."""

    cafa: Endpoint = Field(default_factory=Endpoint)
    pim: Endpoint = Field(default_factory=Endpoint)
    wms: Endpoint = Field(default_factory=Endpoint)
    promotion: Endpoint = Field(default_factory=Endpoint)
    reports: Endpoint = Field(default_factory=Endpoint)
    json_api: Endpoint = Field(default_factory=Endpoint, alias="json")
    assignments: Endpoint = Field(default_factory=Endpoint)
    account_admin: Endpoint = Field(default_factory=Endpoint, alias="account-admin")
    visitor_queue: Endpoint = Field(default_factory=Endpoint, alias="visitor-queue")
    loyalty: Endpoint = Field(default_factory=Endpoint)
    cdn: Endpoint = Field(default_factory=Endpoint)
    tasks: Endpoint = Field(default_factory=Endpoint)
    webhook: Endpoint = Field(default_factory=Endpoint)
    user: Endpoint = Field(default_factory=Endpoint)
    import_: Endpoint = Field(default_factory=Endpoint, alias="import")
    ems: Endpoint = Field(default_factory=Endpoint)
    clockin: Endpoint = Field(default_factory=Endpoint)
    ledger: Endpoint = Field(default_factory=Endpoint)
    auth: Endpoint = Field(default_factory=Endpoint)
    crm: Endpoint = Field(default_factory=Endpoint)
    buum: Endpoint = Field(default_factory=Endpoint)
    sales: Endpoint = Field(default_factory=Endpoint)
    pricing: Endpoint = Field(default_factory=Endpoint)
    inventory: Endpoint = Field(default_factory=Endpoint)
    chair: Endpoint = Field(default_factory=Endpoint)
    pos_api: Endpoint = Field(default_factory=Endpoint, alias="pos-api")
    erply: Endpoint = Field(default_factory=Endpoint)
