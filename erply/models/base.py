"""Базовая модель записей ERPLY API."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErplyRecord(BaseModel):
    """Запись из ответа ERPLY API.

    API типизирует поля нестрого (числа приходят строками и наоборот),
    а набор полей зависит от версии аккаунта — неизвестные поля сохраняются.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )


def empty_list_to_dict(value: Any) -> Any:
    """PHP-бэкенд ERPLY отдаёт пустой словарь как []."""
    if isinstance(value, list) and not value:
        return {}
    return value
