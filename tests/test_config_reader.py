"""Тесты для config_reader модуля."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from erply.config_reader import (
    CONFIG_ENV_VAR,
    ErplyConfig,
    get_config,
    get_erply_config,
    parse_config_file,
)
from erply.transport import DEFAULT_TIMEOUT, ClientConfig

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clear_config_cache() -> Iterator[None]:
    """Сбросить кэш конфигурации до и после теста."""
    parse_config_file.cache_clear()
    get_config.cache_clear()
    yield
    parse_config_file.cache_clear()
    get_config.cache_clear()


def write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.yml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


class TestGetErplyConfig:
    """Тесты чтения конфигурации ERPLY."""

    def test_reads_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = write_config(
            tmp_path,
            "erply:\n"
            "  client_code: '123456'\n"
            "  session_key: secret\n",
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        config = get_erply_config()

        assert config.client_code == "123456"
        assert config.session_key.get_secret_value() == "secret"
        assert config.partner_key is None
        assert config.timeout == DEFAULT_TIMEOUT

    def test_secret_not_in_repr(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = write_config(
            tmp_path, "erply:\n  client_code: '1'\n  session_key: secret\n"
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert "secret" not in repr(get_erply_config())

    def test_missing_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

        with pytest.raises(ValueError, match=CONFIG_ENV_VAR):
            get_erply_config()

    def test_missing_root_key(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = write_config(tmp_path, "other:\n  value: 1\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        with pytest.raises(ValueError, match="erply"):
            get_erply_config()

    def test_not_a_mapping(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = write_config(tmp_path, "- one\n- two\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        with pytest.raises(ValueError):
            get_erply_config()

    def test_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))

        with pytest.raises(FileNotFoundError):
            get_erply_config()


class TestToClientConfig:
    """Тесты сборки ClientConfig."""

    def test_with_partner_key_and_url(self) -> None:
        config = ErplyConfig(
            client_code="123456",
            session_key="sk",
            partner_key="pk",
            url="https://proxy.example.com/api/",
        )

        assert config.to_client_config() == ClientConfig(
            client_code="123456",
            session_key="sk",
            partner_key="pk",
            base_url="https://proxy.example.com/api/",
        )

    def test_default_url(self) -> None:
        client_config = ErplyConfig(client_code="123456", session_key="sk").to_client_config()

        assert client_config.partner_key is None
        assert client_config.url == "https://123456.erply.com/api/"
