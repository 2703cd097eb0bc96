"""Исключения для работы с ERPLY API.

Иерархия повторяет уровни обработки запроса:
- TransportError — сеть или HTTP-статус ответа;
- DecodeError — тело ответа не разбирается в ожидаемую структуру;
- ApiError — корректный ответ со статусом ошибки (общим или элемента bulk);
- EmptyResultError — успешный статус, но нет ни одной записи там,
  где она обязана быть (например, после сохранения).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from erply.status import Status

# Сколько символов тела ответа показывать в сообщениях об ошибках
BODY_EXCERPT_LENGTH = 500


def body_excerpt(body: bytes | str | None) -> str:
    """Обрезать тело ответа для сообщения об ошибке."""
    if body is None:
        return ""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if len(body) > BODY_EXCERPT_LENGTH:
        return body[:BODY_EXCERPT_LENGTH] + "..."
    return body


class ErplyException(Exception):
    """Базовое исключение для ошибок ERPLY API."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class TransportError(ErplyException):
    """Ошибка сети или HTTP-уровня.

    Выбрасывается при:
    - Ошибке соединения или таймауте aiohttp
    - HTTP-статусе ответа, отличном от 200
    """

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        http_status: int | None = None,
        body: bytes | None = None,
    ) -> None:
        super().__init__(message, original_error=original_error)
        self.http_status = http_status
        self.body = body


class DecodeError(ErplyException):
    """Тело ответа не удалось разобрать.

    Всегда хранит сырое тело ответа — без него невозможно понять,
    что именно изменилось на стороне API.
    """

    def __init__(
        self,
        message: str,
        body: bytes | str | None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            f"{message}: {body_excerpt(body)!r}", original_error=original_error
        )
        self.body = body


class ApiError(ErplyException):
    """API вернул статус, отличный от "ok".

    Attributes:
        status: Статус из ответа (общий или элемента bulk-запроса)
        code: Код ошибки API (ErrorCode, если код известен)
        message: Сообщение в формате "{request}: {responseStatus}"
        item_index: Индекс элемента bulk-запроса или None для общего статуса
    """

    def __init__(self, status: Status, item_index: int | None = None) -> None:
        self.status = status
        self.code = status.code
        self.message = f"{status.verb}: {status.response_status}"
        self.item_index = item_index

        text = f"Ошибка ERPLY API {int(self.code)} ({self.message})"
        if status.error_field:
            text += f", поле {status.error_field}"
        if item_index is not None:
            text = f"Элемент bulk-запроса #{item_index}: {text}"
        super().__init__(text)


class EmptyResultError(ErplyException):
    """Успешный ответ без записей там, где запись обязательна."""

    def __init__(self, verb: str, item_index: int | None = None) -> None:
        text = f"{verb}: в ответе нет записей"
        if item_index is not None:
            text = f"Элемент bulk-запроса #{item_index}: {text}"
        super().__init__(text)
        self.verb = verb
        self.item_index = item_index
