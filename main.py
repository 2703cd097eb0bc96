"""Пример использования ERPLY API клиента."""

import asyncio
import logging

from erply import ErplyApiClientManager, get_erply_config

# Настраиваем логирование
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


async def main() -> None:
    """Основная функция."""
    # Загружаем конфигурацию из config.yml
    config = get_erply_config()
    print(f"Подключение к аккаунту: {config.client_code}")

    # Создаём менеджер API; соединение закроется при выходе из блока
    async with ErplyApiClientManager.from_config(config) as manager:
        warehouses = await manager.get_warehouses()
        print(f"\nСклады ({len(warehouses)} шт.):")
        for warehouse in warehouses[:5]:  # Показываем первые 5
            print(f"  - {warehouse.name} (id: {warehouse.warehouse_id})")

        # Две страницы товаров одним bulk-запросом
        response = await manager.get_products_bulk(
            [{"pageNo": 1}, {"pageNo": 2}],
            {"recordsOnPage": 20},
        )
        for item in response:
            print(f"\nСтраница {item.input.filters['pageNo']}: {len(item.records)} товаров")

    print("\nСоединение закрыто.")


if __name__ == "__main__":
    asyncio.run(main())
