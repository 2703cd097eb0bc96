"""Конфигурация для ERPLY API клиента.

Читает настройки из YAML-файла, путь к которому указывается
в переменной окружения ERPLY_CONFIG.

Переменные окружения автоматически загружаются из .env файла.
"""

from functools import lru_cache
from os import getenv
from typing import Any, TypeVar, cast

from dotenv import load_dotenv
from pydantic import BaseModel, SecretStr
from yaml import CSafeLoader as SafeLoader
from yaml import load

from erply.transport import DEFAULT_TIMEOUT, ClientConfig

# Автоматически загружаем переменные из .env файла
load_dotenv()

CONFIG_ENV_VAR = "ERPLY_CONFIG"

ConfigType = TypeVar("ConfigType", bound=BaseModel)


class ErplyConfig(BaseModel):
    """Конфигурация для подключения к ERPLY API."""

    # Код клиента (номер аккаунта ERPLY)
    client_code: str

    # Ключ сессии
    session_key: SecretStr

    # Ключ партнёра, если интеграция зарегистрирована как партнёрская
    partner_key: SecretStr | None = None

    # Адрес API; по умолчанию https://{client_code}.erply.com/api/
    url: str | None = None

    # Таймаут HTTP-запроса в секундах
    timeout: float = DEFAULT_TIMEOUT

    def to_client_config(self) -> ClientConfig:
        """Собрать неизменяемые настройки подключения."""
        return ClientConfig(
            client_code=self.client_code,
            session_key=self.session_key.get_secret_value(),
            partner_key=(
                self.partner_key.get_secret_value() if self.partner_key else None
            ),
            base_url=self.url,
        )


@lru_cache
def parse_config_file() -> dict[str, Any]:
    """Прочитать и распарсить YAML-файл конфигурации.

    Путь к файлу берётся из переменной окружения ERPLY_CONFIG.

    Returns:
        Словарь с конфигурацией

    Raises:
        ValueError: Если переменная окружения не задана
        FileNotFoundError: Если файл не найден
    """
    file_path = getenv(CONFIG_ENV_VAR)
    if file_path is None:
        raise ValueError(
            f"Переменная окружения {CONFIG_ENV_VAR} не задана. "
            "Укажите путь к файлу конфигурации."
        )

    with open(file_path, "rb") as file:
        config_data = load(file, Loader=SafeLoader)

    if not isinstance(config_data, dict):
        raise ValueError("Конфигурация должна быть словарём")
    return config_data


@lru_cache
def get_config(model: type[ConfigType], root_key: str) -> ConfigType:  # noqa: UP047
    """Получить конфигурацию определённого типа из файла.

    Args:
        model: Pydantic-модель для валидации
        root_key: Корневой ключ в YAML-файле

    Returns:
        Экземпляр модели с заполненными значениями

    Raises:
        ValueError: Если ключ не найден в конфигурации
    """
    config_dict = parse_config_file()
    if root_key not in config_dict:
        raise ValueError(f"Ключ '{root_key}' не найден в конфигурации")
    return model.model_validate(config_dict[root_key])


def get_erply_config() -> ErplyConfig:
    """Получить конфигурацию ERPLY.

    Удобная обёртка для получения ErplyConfig.

    Returns:
        Экземпляр ErplyConfig
    """
    return cast(ErplyConfig, get_config(ErplyConfig, "erply"))
