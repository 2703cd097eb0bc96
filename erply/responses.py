"""Разбор и проверка ответов одиночных запросов.

Все методы API устроены одинаково: отправить запрос, разобрать
{status, records}, проверить статус, вернуть записи. Отличается только
тип записи — он передаётся параметром.
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from erply.exceptions import DecodeError, EmptyResultError
from erply.status import Status, check_status
from erply.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    """Ответ одиночного запроса."""

    status: Status
    records: list[T] = Field(default_factory=list)

    @field_validator("records", mode="before")
    @classmethod
    def _null_records(cls, value: Any) -> Any:
        return [] if value is None else value


def decode_response(body: bytes, record_type: type[T]) -> Response[T]:  # noqa: UP047
    """Разобрать тело ответа в Response с записями заданного типа.

    Args:
        body: Сырое тело ответа
        record_type: Тип записи

    Returns:
        Разобранный ответ

    Raises:
        DecodeError: Если тело не JSON или не совпадает со структурой
    """
    try:
        return Response[record_type].model_validate_json(body)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise DecodeError(
            f"не удалось разобрать ответ ({record_type.__name__})",
            body=body,
            original_error=exc,
        ) from exc


async def call(  # noqa: UP047
    transport: Transport,
    verb: str,
    filters: Mapping[str, Any] | None,
    record_type: type[T],
    *,
    require_records: bool = False,
) -> list[T]:
    """Выполнить одиночный запрос и вернуть проверенные записи.

    Args:
        transport: Транспорт
        verb: Имя метода API
        filters: Параметры запроса (не изменяются)
        record_type: Тип записи в ответе
        require_records: Считать ли пустой список записей ошибкой

    Returns:
        Список записей (может быть пустым, если require_records=False)

    Raises:
        TransportError: Ошибка сети или HTTP
        DecodeError: Ответ не разобран
        ApiError: Статус ответа не "ok"
        EmptyResultError: Нет записей при require_records=True
    """
    body = await transport.send(verb, dict(filters or {}))
    response = decode_response(body, record_type)
    check_status(response.status)

    if require_records and not response.records:
        raise EmptyResultError(verb)

    logger.debug("%s: получено записей: %d", verb, len(response.records))
    return response.records
