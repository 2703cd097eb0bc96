"""Статус ответа ERPLY API.

Статус приходит на верхнем уровне каждого ответа, а в bulk-ответах —
ещё и в каждом элементе. Проверка всегда двухуровневая: общий "ok"
не означает, что успешен каждый элемент bulk-запроса.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from erply.exceptions import ApiError

RESPONSE_STATUS_OK = "ok"


class ErrorCode(IntEnum):
    """Известные коды ошибок ERPLY API."""

    NO_ERROR = 0
    UNDER_MAINTENANCE = 1000
    ACCESS_NOT_SET_UP = 1001
    REQUEST_LIMIT_EXCEEDED = 1002
    DATABASE_UNAVAILABLE = 1003
    UNKNOWN_REQUEST = 1005
    REQUEST_NOT_AVAILABLE = 1006
    AUTHENTICATION_REQUIRED = 1009
    REQUIRED_PARAMETER_MISSING = 1010
    INVALID_CLASSIFIER_ID = 1011
    NON_UNIQUE_VALUE = 1012
    INCORRECT_DATA_TYPE = 1014
    INVALID_VALUE = 1016
    BULK_LIMIT_EXCEEDED = 1020
    CREDENTIALS_MISSING = 1050
    LOGIN_FAILED = 1051
    USER_BLOCKED = 1052
    NO_PASSWORD_SET = 1053
    SESSION_EXPIRED = 1054
    INVALID_SESSION_KEY = 1055
    SESSION_KEY_EXPIRED = 1056
    NO_VIEWING_RIGHTS = 1060
    NO_ADDING_RIGHTS = 1061
    NO_EDITING_RIGHTS = 1062
    NO_DELETING_RIGHTS = 1063


class Status(BaseModel):
    """Статус запроса (общий статус ответа)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    request: str = ""
    request_unix_time: int | None = Field(default=None, alias="requestUnixTime")
    response_status: str = Field(default="", alias="responseStatus")
    error_code: int = Field(default=0, alias="errorCode")
    error_field: str | None = Field(default=None, alias="errorField")
    generation_time: float | None = Field(default=None, alias="generationTime")
    records_total: int | None = Field(default=None, alias="recordsTotal")
    records_in_response: int | None = Field(default=None, alias="recordsInResponse")

    @field_validator("error_code", mode="before")
    @classmethod
    def _empty_error_code(cls, value: object) -> object:
        # API иногда отдаёт errorCode пустой строкой или null
        if value is None or value == "":
            return 0
        return value

    @property
    def verb(self) -> str:
        """Имя вызванного метода API."""
        return self.request

    @property
    def code(self) -> ErrorCode | int:
        """Код ошибки как ErrorCode, если он известен."""
        try:
            return ErrorCode(self.error_code)
        except ValueError:
            return self.error_code


class BulkItemStatus(Status):
    """Статус отдельного элемента bulk-ответа."""

    request_name: str = Field(default="", alias="requestName")
    request_id: int | str | None = Field(default=None, alias="requestID")

    @property
    def verb(self) -> str:
        return self.request or self.request_name


def is_ok(status: Status) -> bool:
    """Проверить, что статус успешный (ровно "ok")."""
    return status.response_status == RESPONSE_STATUS_OK


def check_status(status: Status, item_index: int | None = None) -> None:
    """Выбросить ApiError, если статус не успешный.

    Args:
        status: Проверяемый статус
        item_index: Индекс элемента bulk-запроса (для диагностики)

    Raises:
        ApiError: Если статус не "ok"
    """
    if not is_ok(status):
        raise ApiError(status, item_index=item_index)
