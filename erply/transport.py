"""HTTP-транспорт ERPLY API.

Один вызов send/send_bulk — ровно один POST-запрос с form-encoded телом.
Статусы API здесь не разбираются, это задача вызывающего кода.
"""

import asyncio
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import aiohttp

from erply.exceptions import TransportError, body_excerpt

if TYPE_CHECKING:
    from erply.bulk import BulkInput

logger = logging.getLogger(__name__)
logger.setLevel(level=logging.DEBUG)

DEFAULT_URL_TEMPLATE = "https://{client_code}.erply.com/api/"
DEFAULT_TIMEOUT = 60.0

# Больше 100 подзапросов API отклоняет целиком (ошибка 1020)
MAX_BULK_REQUESTS = 100


@dataclass(frozen=True)
class ClientConfig:
    """Настройки подключения к ERPLY.

    Attributes:
        client_code: Код клиента (номер аккаунта)
        session_key: Ключ сессии
        partner_key: Ключ партнёра (опционально)
        base_url: Адрес API; по умолчанию https://{client_code}.erply.com/api/
    """

    client_code: str
    session_key: str
    partner_key: str | None = None
    base_url: str | None = None

    @property
    def url(self) -> str:
        """Адрес, на который отправляются запросы."""
        if self.base_url:
            return self.base_url
        return DEFAULT_URL_TEMPLATE.format(client_code=self.client_code)

    def __repr__(self) -> str:
        # ключ сессии в repr не попадает
        return (
            f"ClientConfig(client_code={self.client_code!r}, "
            f"partner_key={'***' if self.partner_key else None}, "
            f"base_url={self.base_url!r})"
        )


def _json_default(value: Any) -> str:
    """Значения, которые json не умеет кодировать сам."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Значение типа {type(value).__name__} не сериализуется в JSON")


def stringify(value: Any) -> str:
    """Привести значение фильтра к строке для form-encoded тела.

    Словари и списки кодируются в JSON, bool — в "1"/"0".

    Raises:
        ValueError: Для None или значения, которое не кодируется в JSON
    """
    if value is None:
        raise ValueError("Значение фильтра не может быть None")
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, str):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value, default=_json_default)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
    return str(value)


def form_params(filters: Mapping[str, Any] | None) -> dict[str, str]:
    """Фильтры в параметры формы; ключи со значением None не отправляются."""
    return {
        key: stringify(value)
        for key, value in (filters or {}).items()
        if value is not None
    }


class Transport:
    """Отправка запросов к ERPLY API через aiohttp.

    Сессию можно передать снаружи (например, мок в тестах) — тогда
    транспорт её не закрывает. Иначе сессия создаётся при первом запросе
    и закрывается в close().
    """

    def __init__(
        self,
        config: ClientConfig,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._config = config
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def _get_session(self) -> aiohttp.ClientSession:
        """Получить или создать HTTP-сессию."""
        if self._session is not None and self._session.closed:
            # чужую сессию пересоздавать нельзя
            if not self._owns_session:
                raise TransportError("Переданная HTTP-сессия уже закрыта")
            self._session = None
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Закрыть собственную HTTP-сессию."""
        if self._owns_session and self._session is not None:
            if not self._session.closed:
                await self._session.close()
            self._session = None

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _base_params(self) -> dict[str, str]:
        params = {
            "clientCode": self._config.client_code,
            "sessionKey": self._config.session_key,
            "sendContentType": "1",
        }
        if self._config.partner_key:
            params["partnerKey"] = self._config.partner_key
        return params

    async def send(self, verb: str, filters: Mapping[str, Any] | None = None) -> bytes:
        """Отправить одиночный запрос.

        Args:
            verb: Имя метода API (например, getProducts)
            filters: Параметры запроса (ключи со значением None не отправляются)

        Returns:
            Сырое тело ответа

        Raises:
            ValueError: Если имя метода пустое или значение фильтра
                не кодируется
            TransportError: При ошибке сети или HTTP-статусе, отличном от 200
        """
        if not verb:
            raise ValueError("Имя метода API не может быть пустым")

        params = form_params(filters)
        params.update(self._base_params())
        params["request"] = verb

        return await self._post(params, verb)

    async def send_bulk(
        self,
        inputs: Sequence["BulkInput"],
        shared_filters: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Отправить несколько запросов одним bulk-вызовом.

        Каждый элемент массива requests получает requestName и requestID,
        равный его позиции — по нему ответы сопоставляются с запросами.

        Args:
            inputs: Упорядоченные подзапросы
            shared_filters: Общие параметры всего bulk-запроса

        Returns:
            Сырое тело ответа

        Raises:
            ValueError: Если подзапросов нет, их больше MAX_BULK_REQUESTS
                или у подзапроса пустое имя метода или значение,
                не кодируемое в JSON
            TransportError: При ошибке сети или HTTP-статусе, отличном от 200
        """
        if not inputs:
            raise ValueError("Bulk-запрос должен содержать хотя бы один подзапрос")
        if len(inputs) > MAX_BULK_REQUESTS:
            raise ValueError(
                f"Bulk-запрос содержит {len(inputs)} подзапросов, "
                f"максимум {MAX_BULK_REQUESTS}"
            )

        requests = []
        for index, bulk_input in enumerate(inputs):
            if not bulk_input.verb:
                raise ValueError(f"Пустое имя метода у подзапроса #{index}")
            item = {
                key: value
                for key, value in bulk_input.filters.items()
                if value is not None
            }
            item["requestName"] = bulk_input.verb
            item["requestID"] = index
            try:
                requests.append(json.dumps(item, default=_json_default))
            except TypeError as exc:
                raise ValueError(f"Подзапрос #{index}: {exc}") from exc

        params = form_params(shared_filters)
        params.update(self._base_params())
        params["requests"] = "[" + ", ".join(requests) + "]"

        verbs = ",".join(sorted({bulk_input.verb for bulk_input in inputs}))
        return await self._post(params, f"bulk[{verbs}]x{len(inputs)}")

    async def _post(self, params: dict[str, str], label: str) -> bytes:
        session = await self._get_session()
        logger.debug("POST %s: %s", self._config.url, label)

        try:
            async with session.post(self._config.url, data=params) as response:
                body = await response.read()
                http_status = response.status
        except aiohttp.ClientError as exc:
            raise TransportError(
                f"{label}: ошибка запроса: {exc}", original_error=exc
            ) from exc
        except asyncio.TimeoutError as exc:
            raise TransportError(
                f"{label}: превышено время ожидания ответа", original_error=exc
            ) from exc

        logger.debug("%s: HTTP %d, %d байт", label, http_status, len(body))

        if http_status != 200:
            raise TransportError(
                f"{label}: неуспешный HTTP-статус {http_status}: {body_excerpt(body)!r}",
                http_status=http_status,
                body=body,
            )
        return body
