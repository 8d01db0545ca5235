import pytest
from mizu_portal_api.core.client import create_client_from_env
from mizu_portal_api.core.config import (
    DEFAULT_BASE_URL,
    load_env_config,
    normalize_base_url,
)


def test_normalize_base_url():
    assert normalize_base_url("https://a.io/api") == "https://a.io/api/"
    assert normalize_base_url("https://a.io/api/") == "https://a.io/api/"
    assert normalize_base_url(None) == DEFAULT_BASE_URL
    assert normalize_base_url("   ") == DEFAULT_BASE_URL


def test_load_env_defaults(monkeypatch):
    monkeypatch.delenv("MIZU_API_BASE_URL", raising=False)
    monkeypatch.delenv("MIZU_API_TIMEOUT_SECONDS", raising=False)
    cfg = load_env_config(use_dotenv=False)
    assert cfg.base_url == "http://localhost:5000/api/"
    assert cfg.timeout_seconds is None


def test_load_env_values(monkeypatch):
    monkeypatch.setenv("MIZU_API_BASE_URL", " https://portal.example/api ")
    monkeypatch.setenv("MIZU_API_TIMEOUT_SECONDS", "12.5")
    cfg = load_env_config(use_dotenv=False)
    assert cfg.base_url == "https://portal.example/api/"
    assert cfg.timeout_seconds == 12.5


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_bad_timeout_rejected(monkeypatch, raw):
    monkeypatch.setenv("MIZU_API_TIMEOUT_SECONDS", raw)
    with pytest.raises(ValueError):
        load_env_config(use_dotenv=False)


def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("MIZU_API_BASE_URL", "https://portal.example/api")
    monkeypatch.delenv("MIZU_API_TIMEOUT_SECONDS", raising=False)
    client = create_client_from_env(timeout_seconds=3.0)
    assert client.base_url == "https://portal.example/api/"
    assert client.timeout_seconds == 3.0
