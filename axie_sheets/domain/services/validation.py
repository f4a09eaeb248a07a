from __future__ import annotations

from typing import cast

from axie_sheets.domain.entities.identifiers import (
    CURRENCIES,
    POOLS,
    TOKENS,
    Currency,
    PoolId,
    TokenId,
)
from axie_sheets.domain.exceptions import InvalidEnumError


def _require_member(value: object, *, kind: str, valid_values: tuple[str, ...]) -> str:
    if not isinstance(value, str) or value not in valid_values:
        raise InvalidEnumError(kind=kind, value=value, valid_values=valid_values)
    return value


def validate_pool(value: object) -> PoolId:
    return cast(PoolId, _require_member(value, kind="pool", valid_values=POOLS))


def validate_token(value: object) -> TokenId:
    return cast(TokenId, _require_member(value, kind="token", valid_values=TOKENS))


def validate_currency(value: object) -> Currency:
    return cast(Currency, _require_member(value, kind="currency", valid_values=CURRENCIES))
