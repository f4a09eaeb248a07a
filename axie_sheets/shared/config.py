from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    axie_api_base: str
    axie_api_timeout_seconds: float
    default_currency: str


def get_settings() -> Settings:
    return Settings(
        axie_api_base=_env("AXIE_API_BASE", "https://api.axie.uno"),
        axie_api_timeout_seconds=float(_env("AXIE_API_TIMEOUT_SECONDS", "10")),
        default_currency=(_env("AXIE_DEFAULT_CURRENCY", "usd") or "usd").strip().lower(),
    )
