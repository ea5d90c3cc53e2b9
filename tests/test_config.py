"""Tests for ClientConfig and environment loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cronos_evm_client.client.config import API_KEY_ENV_VAR, ENDPOINT_ENV_VAR, ClientConfig


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Unset config variables; setenv first so values loaded from .env are undone too."""
    for name in (ENDPOINT_ENV_VAR, API_KEY_ENV_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestClientConfig:
    def test_frozen(self) -> None:
        config = ClientConfig(endpoint="https://evm.cronos.org")
        with pytest.raises(AttributeError):
            config.endpoint = "https://other"  # type: ignore[misc]

    def test_headers_with_key(self) -> None:
        assert ClientConfig("https://evm.cronos.org", "abc").headers == {"Authorization": "Bearer abc"}

    def test_headers_without_key(self) -> None:
        assert ClientConfig("https://evm.cronos.org").headers == {}
        assert ClientConfig("https://evm.cronos.org", "").headers == {}


class TestFromEnv:
    def test_reads_environment(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv(ENDPOINT_ENV_VAR, "https://node.example")
        clean_env.setenv(API_KEY_ENV_VAR, "secret")
        config = ClientConfig.from_env(tmp_path / "missing.env")
        assert config == ClientConfig("https://node.example", "secret")

    def test_reads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(
            f"{ENDPOINT_ENV_VAR}=https://file.example\n{API_KEY_ENV_VAR}=from-file\n",
            encoding="utf-8",
        )
        config = ClientConfig.from_env(env_file)
        assert config.endpoint == "https://file.example"
        assert config.api_key == "from-file"

    def test_empty_api_key_is_none(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv(ENDPOINT_ENV_VAR, "https://node.example")
        clean_env.setenv(API_KEY_ENV_VAR, "")
        assert ClientConfig.from_env(tmp_path / "missing.env").api_key is None

    def test_missing_endpoint(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match=ENDPOINT_ENV_VAR):
            ClientConfig.from_env(tmp_path / "missing.env")
