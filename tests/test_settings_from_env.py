import pytest

from tx_tax_auctions.errors import ConfigurationError
from tx_tax_auctions.settings import (
    ENDPOINT_URL,
    Settings,
    get_settings,
    reset_settings_cache,
)


def test_defaults():
    settings = get_settings()
    assert settings.sale_type == "SA"
    assert settings.min_adjudged_value == 90000
    assert settings.pause_seconds == 1.0
    assert settings.endpoint_url == ENDPOINT_URL


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TTA_SALE_TYPE", "so")
    monkeypatch.setenv("TTA_MIN_ADJUDGED_VALUE", "150000")
    monkeypatch.setenv("TTA_PAUSE_SECONDS", "2.5")
    monkeypatch.setenv("TTA_REGISTRY_PATH", "/tmp/counties")
    reset_settings_cache()
    settings = get_settings()
    assert settings.sale_type == "SO"
    assert settings.min_adjudged_value == 150000
    assert settings.pause_seconds == 2.5
    assert settings.registry_path == "/tmp/counties"


def test_bad_env_number(monkeypatch):
    monkeypatch.setenv("TTA_MIN_ADJUDGED_VALUE", "lots")
    reset_settings_cache()
    with pytest.raises(ConfigurationError):
        get_settings()


def test_bad_sale_type():
    with pytest.raises(ConfigurationError):
        Settings(sale_type="XX")
    with pytest.raises(ConfigurationError):
        Settings().with_overrides(sale_type="XX")


def test_with_overrides_ignores_none():
    settings = Settings().with_overrides(sale_type=None, pause_seconds=0)
    assert settings.sale_type == "SA"
    assert settings.pause_seconds == 0
