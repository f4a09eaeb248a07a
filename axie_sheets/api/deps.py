from __future__ import annotations

from functools import lru_cache

from axie_sheets.services.sheet_functions import SheetFunctions
from axie_sheets.infrastructure.clients.axie_uno_client import (
    AxieUnoClient,
    AxieUnoClientSettings,
)
from axie_sheets.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_axie_uno_client() -> AxieUnoClient:
    settings = get_settings()
    return AxieUnoClient(
        AxieUnoClientSettings(
            api_base=settings.axie_api_base,
            timeout_seconds=settings.axie_api_timeout_seconds,
        )
    )


def get_sheet_functions() -> SheetFunctions:
    return SheetFunctions(api_port=_get_axie_uno_client())


def get_default_currency() -> str:
    return get_settings().default_currency
