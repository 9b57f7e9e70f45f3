from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../shopfront project root
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_float(*keys: str, default: float | None = None) -> float | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    catalog_path: str
    shop_name: str
    whatsapp_number: str
    messaging_url: str
    currency: str
    currency_symbol: str
    decimals: int
    api_base_url: str
    cart_storage_path: str
    http_timeout: float
    log_level: str


def load_settings() -> Settings:
    port = _get_int("PORT", default=3000)
    decimals = _get_int("DECIMALS", default=2)
    if port is None or port <= 0:
        raise RuntimeError("PORT must be a positive integer")
    if decimals is None or decimals < 0:
        raise RuntimeError("DECIMALS must be >= 0")

    return Settings(
        host=_get_env("HOST", default="0.0.0.0") or "0.0.0.0",
        port=port,
        catalog_path=_get_path("CATALOG_PATH", "PRODUCTS_PATH", default=str(ROOT_DIR / "data" / "products.json")),
        shop_name=_get_env("SHOP_NAME", default="Belivers Fashion Brand") or "Belivers Fashion Brand",
        whatsapp_number=_get_env("WHATSAPP_NUMBER", default="08052443377") or "08052443377",
        messaging_url=_get_env("MESSAGING_URL", default="https://wa.me") or "https://wa.me",
        currency=_get_env("CURRENCY", default="NGN") or "NGN",
        currency_symbol=_get_env("CURRENCY_SYMBOL", default="₦") or "₦",
        decimals=decimals,
        api_base_url=_get_env("API_BASE_URL", default="http://localhost:3000") or "http://localhost:3000",
        cart_storage_path=_get_path(
            "CART_STORAGE_PATH", default=str(ROOT_DIR / "data" / "local_storage.json")
        ),
        http_timeout=_get_float("HTTP_TIMEOUT", default=10.0) or 10.0,
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    )


settings = load_settings()
