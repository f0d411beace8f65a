from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _optional_float(name: str) -> float | None:
    value = _env(name)
    if not value:
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    backend_url: str
    app_origin: str
    backend_timeout_seconds: float | None
    view_capacity: int
    title: str


def get_settings() -> Settings:
    return Settings(
        backend_url=(_env("STOREFRONT_BACKEND_URL", "") or "").rstrip("/"),
        app_origin=(_env("STOREFRONT_APP_ORIGIN", "") or "").rstrip("/"),
        backend_timeout_seconds=_optional_float("STOREFRONT_BACKEND_TIMEOUT_SECONDS"),
        view_capacity=int(_env("STOREFRONT_VIEW_CAPACITY", "1000")),
        title=_env("STOREFRONT_TITLE", "System Management") or "System Management",
    )
