from pathlib import Path

import pytest
from pydantic import ValidationError

from bc_catalog.config import DEFAULT_API_BASE_URL, Settings, get_settings


def test_defaults():
    settings = get_settings()
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.store_hash is None
    assert settings.access_token is None
    assert settings.output_path == Path("products.json")
    assert settings.request_timeout_seconds == 30


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BIGCOMMERCE_API_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("BIGCOMMERCE_STORE_HASH", "abc")
    monkeypatch.setenv("BC_OUTPUT_PATH", "out/products.json")
    monkeypatch.setenv("BC_REQUEST_TIMEOUT_SECONDS", "5")

    settings = Settings()

    assert settings.api_base_url == "http://localhost:8080"
    assert settings.store_hash == "abc"
    assert settings.output_path == Path("out/products.json")
    assert settings.request_timeout_seconds == 5


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("BIGCOMMERCE_ACCESS_TOKEN=from-dotenv\n", encoding="utf-8")
    assert Settings().access_token == "from-dotenv"


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("BC_REQUEST_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings()
