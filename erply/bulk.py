"""Bulk-запросы: несколько вызовов API за один HTTP-запрос.

Подзапросы отправляются упорядоченным массивом, каждый со своим
requestID (равным позиции). Ответ содержит общий статус и по одному
элементу на подзапрос. Проверка:

1. Общий статус — при ошибке ApiError до разбора элементов.
2. Количество элементов и эхо requestID должны совпадать с подзапросами,
   иначе DecodeError.
3. Статус каждого элемента по порядку — на первом неуспешном ApiError
   с индексом элемента. Частичный результат не возвращается.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from erply.exceptions import DecodeError, EmptyResultError
from erply.status import BulkItemStatus, Status, check_status
from erply.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class BulkInput:
    """Один подзапрос bulk-запроса: метод API и его параметры."""

    verb: str
    filters: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class BulkItem(Generic[T]):
    """Результат подзапроса в паре с самим подзапросом."""

    index: int
    input: BulkInput
    status: BulkItemStatus
    records: list[T]


@dataclass
class BulkResponse(Generic[T]):
    """Проверенный ответ bulk-запроса.

    items[i] всегда соответствует i-му подзапросу.
    """

    status: Status
    items: list[BulkItem[T]]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[BulkItem[T]]:
        return iter(self.items)

    def records(self) -> list[T]:
        """Все записи всех элементов в порядке подзапросов."""
        return [record for item in self.items for record in item.records]


class _BulkItemWire(BaseModel, Generic[T]):
    status: BulkItemStatus
    records: list[T] = Field(default_factory=list)

    @field_validator("records", mode="before")
    @classmethod
    def _null_records(cls, value: Any) -> Any:
        return [] if value is None else value


class _BulkEnvelopeWire(BaseModel, Generic[T]):
    status: Status
    # при ошибке общего статуса API не присылает requests
    requests: list[_BulkItemWire[T]] | None = None


def build_inputs(
    verb: str, per_item_filters: Sequence[Mapping[str, Any]]
) -> list[BulkInput]:
    """Собрать упорядоченные подзапросы одного метода."""
    return [BulkInput(verb=verb, filters=dict(filters)) for filters in per_item_filters]


class BulkRequest(Generic[T]):
    """Bulk-вызов одного метода API с записями типа T.

    Использование:
        engine = BulkRequest("getProducts", Product)
        response = await engine.call(transport, [{"pageNo": 1}, {"pageNo": 2}])
    """

    def __init__(self, verb: str, record_type: type[T]) -> None:
        if not verb:
            raise ValueError("Имя метода API не может быть пустым")
        self.verb = verb
        self.record_type = record_type

    def decode(self, body: bytes) -> "_BulkEnvelopeWire[T]":
        """Разобрать тело bulk-ответа.

        Raises:
            DecodeError: Если тело не JSON или не совпадает со структурой
        """
        try:
            return _BulkEnvelopeWire[self.record_type].model_validate_json(body)  # type: ignore[valid-type]
        except ValidationError as exc:
            raise DecodeError(
                f"{self.verb}: не удалось разобрать bulk-ответ "
                f"({self.record_type.__name__})",
                body=body,
                original_error=exc,
            ) from exc

    def pair(
        self,
        inputs: Sequence[BulkInput],
        envelope: "_BulkEnvelopeWire[T]",
        body: bytes,
        *,
        require_records: bool = False,
    ) -> BulkResponse[T]:
        """Проверить ответ и сопоставить элементы с подзапросами.

        Args:
            inputs: Отправленные подзапросы
            envelope: Разобранный ответ
            body: Сырое тело (для DecodeError)
            require_records: Считать ли элемент без записей ошибкой

        Returns:
            Ответ, в котором каждый элемент привязан к своему подзапросу

        Raises:
            ApiError: Неуспешный общий статус или статус элемента
            DecodeError: Элементы не соответствуют подзапросам
            EmptyResultError: Элемент без записей при require_records=True
        """
        check_status(envelope.status)

        wire_items = envelope.requests or []
        if len(wire_items) != len(inputs):
            raise DecodeError(
                f"{self.verb}: в bulk-ответе {len(wire_items)} элементов, "
                f"отправлено подзапросов: {len(inputs)}",
                body=body,
            )

        items: list[BulkItem[T]] = []
        for index, (bulk_input, wire_item) in enumerate(zip(inputs, wire_items)):
            request_id = wire_item.status.request_id
            if request_id is not None and str(request_id) != str(index):
                raise DecodeError(
                    f"{self.verb}: элемент #{index} bulk-ответа "
                    f"содержит requestID={request_id}",
                    body=body,
                )

            check_status(wire_item.status, item_index=index)

            if require_records and not wire_item.records:
                raise EmptyResultError(bulk_input.verb, item_index=index)

            items.append(
                BulkItem(
                    index=index,
                    input=bulk_input,
                    status=wire_item.status,
                    records=wire_item.records,
                )
            )

        return BulkResponse(status=envelope.status, items=items)

    async def call(
        self,
        transport: Transport,
        per_item_filters: Sequence[Mapping[str, Any]],
        shared_filters: Mapping[str, Any] | None = None,
        *,
        require_records: bool = False,
    ) -> BulkResponse[T]:
        """Выполнить bulk-запрос.

        Args:
            transport: Транспорт
            per_item_filters: Параметры подзапросов, по одному набору на подзапрос
            shared_filters: Общие параметры bulk-запроса (не изменяются)
            require_records: Считать ли элемент без записей ошибкой

        Returns:
            Проверенный ответ; len(response) == len(per_item_filters)
        """
        inputs = build_inputs(self.verb, per_item_filters)
        body = await transport.send_bulk(inputs, dict(shared_filters or {}))
        envelope = self.decode(body)
        response = self.pair(inputs, envelope, body, require_records=require_records)

        logger.debug(
            "%s: bulk из %d подзапросов, записей: %d",
            self.verb,
            len(response),
            sum(len(item.records) for item in response),
        )
        return response
