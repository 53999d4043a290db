from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache

from .errors import ConfigurationError


ENDPOINT_URL = "http://actweb.acttax.com/pls/sales/property_taxsales_pkg.results_page"
STATE_CODE = "TX"

# SA=sale, SO=struck-off
SALE_TYPES = ("SA", "SO")


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Knobs for one search run.

    Defaults match what the acttax search form is normally queried with.
    """

    registry_path: str = "counties/searchable_counties"
    sale_type: str = "SA"
    min_adjudged_value: int = 90000
    pause_seconds: float = 1.0
    endpoint_url: str = ENDPOINT_URL
    timeout: float = 30

    def __post_init__(self):
        if self.sale_type not in SALE_TYPES:
            raise ConfigurationError(
                f"sale type must be one of {', '.join(SALE_TYPES)}, got {self.sale_type!r}"
            )
        if self.min_adjudged_value < 0:
            raise ConfigurationError("minimum adjudged value cannot be negative")
        if self.pause_seconds < 0:
            raise ConfigurationError("pause cannot be negative")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            registry_path=_env_str("TTA_REGISTRY_PATH", cls.registry_path),
            sale_type=_env_str("TTA_SALE_TYPE", cls.sale_type).upper(),
            min_adjudged_value=_env_number(
                "TTA_MIN_ADJUDGED_VALUE", cls.min_adjudged_value, int
            ),
            pause_seconds=_env_number("TTA_PAUSE_SECONDS", cls.pause_seconds, float),
            endpoint_url=_env_str("TTA_ENDPOINT_URL", cls.endpoint_url),
            timeout=_env_number("TTA_TIMEOUT", cls.timeout, float),
        )

    def with_overrides(self, **overrides) -> "Settings":
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings_cache() -> None:
    """Test helper to force env re-read."""

    get_settings.cache_clear()
