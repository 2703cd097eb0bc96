"""Тесты для exceptions модуля."""

import pytest

from erply.exceptions import (
    BODY_EXCERPT_LENGTH,
    ApiError,
    DecodeError,
    EmptyResultError,
    ErplyException,
    TransportError,
)
from erply.status import BulkItemStatus, ErrorCode, Status

# Маркируем все тесты в этом модуле как unit-тесты
pytestmark = pytest.mark.unit


class TestErplyException:
    """Тесты для базового исключения."""

    def test_message(self) -> None:
        """Сообщение сохраняется корректно."""
        exc = ErplyException("Test error")

        assert str(exc) == "Test error"

    def test_original_error(self) -> None:
        """Оригинальная ошибка сохраняется."""
        original = ValueError("Original error")
        exc = ErplyException("Wrapped error", original_error=original)

        assert exc.original_error is original

    def test_original_error_default_none(self) -> None:
        """По умолчанию original_error = None."""
        exc = ErplyException("Error")

        assert exc.original_error is None

    @pytest.mark.parametrize(
        "exc_type", [TransportError, DecodeError, ApiError, EmptyResultError]
    )
    def test_subclasses_inherit_from_base(self, exc_type: type) -> None:
        """Все ошибки клиента ловятся базовым классом."""
        assert issubclass(exc_type, ErplyException)


class TestTransportError:
    """Тесты для ошибки транспорта."""

    def test_keeps_http_status_and_body(self) -> None:
        """HTTP-статус и тело ответа сохраняются."""
        exc = TransportError("bad gateway", http_status=502, body=b"<html>")

        assert exc.http_status == 502
        assert exc.body == b"<html>"

    def test_with_original_error(self) -> None:
        """TransportError сохраняет оригинальную ошибку."""
        original = ConnectionError("Connection refused")
        exc = TransportError("request failed", original_error=original)

        assert exc.original_error is original
        assert exc.http_status is None


class TestDecodeError:
    """Тесты для ошибки разбора ответа."""

    def test_message_contains_raw_body(self) -> None:
        """Сырое тело попадает в сообщение и в атрибут body."""
        exc = DecodeError("failed", body=b"<html>oops</html>")

        assert exc.body == b"<html>oops</html>"
        assert "<html>oops</html>" in str(exc)

    def test_long_body_is_truncated_in_message(self) -> None:
        """В сообщении тело обрезается, в атрибуте хранится полностью."""
        body = b"x" * (BODY_EXCERPT_LENGTH * 2)
        exc = DecodeError("failed", body=body)

        assert exc.body == body
        assert len(str(exc)) < len(body)

    def test_none_body(self) -> None:
        """Пустое тело не ломает сообщение."""
        exc = DecodeError("failed", body=None)

        assert exc.body is None


class TestApiError:
    """Тесты для ошибки статуса API."""

    def test_fields_from_status(self) -> None:
        """Код и сообщение берутся из статуса без изменений."""
        status = Status(request="getProducts", responseStatus="error", errorCode=1016)
        exc = ApiError(status)

        assert exc.code == ErrorCode.INVALID_VALUE
        assert exc.code == 1016
        assert exc.message == "getProducts: error"
        assert exc.status is status
        assert exc.item_index is None

    def test_unknown_code_stays_int(self) -> None:
        """Неизвестный код остаётся числом."""
        exc = ApiError(Status(request="getProducts", responseStatus="error", errorCode=4242))

        assert exc.code == 4242
        assert not isinstance(exc.code, ErrorCode)

    def test_item_index_in_message(self) -> None:
        """Индекс элемента bulk-запроса попадает в сообщение."""
        status = BulkItemStatus(
            requestName="saveProduct", responseStatus="error", errorCode=1010
        )
        exc = ApiError(status, item_index=3)

        assert exc.item_index == 3
        assert exc.message == "saveProduct: error"
        assert "#3" in str(exc)

    def test_error_field_in_message(self) -> None:
        """Поле с ошибкой попадает в сообщение."""
        status = Status(
            request="saveProduct",
            responseStatus="error",
            errorCode=1010,
            errorField="groupID",
        )

        assert "groupID" in str(ApiError(status))


class TestEmptyResultError:
    """Тесты для ошибки пустого результата."""

    def test_verb(self) -> None:
        exc = EmptyResultError("saveAddress")

        assert exc.verb == "saveAddress"
        assert exc.item_index is None
        assert "saveAddress" in str(exc)

    def test_item_index(self) -> None:
        exc = EmptyResultError("saveProduct", item_index=2)

        assert exc.item_index == 2
        assert "#2" in str(exc)
