from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException

from axie_sheets.api.deps import get_default_currency, get_sheet_functions
from axie_sheets.api.schemas.functions import (
    BalancesResponse,
    DateResponse,
    IntegerResponse,
    NumberResponse,
    PoolInfoResponse,
    TextResponse,
    TokenInfoResponse,
)
from axie_sheets.services.sheet_functions import SheetFunctions
from axie_sheets.domain.exceptions import FetchFailureError, InvalidEnumError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/functions")

T = TypeVar("T")


def _call(fn: Callable[..., T], *args) -> T:
    try:
        return fn(*args)
    except InvalidEnumError as exc:
        logger.warning(
            "functions_router: invalid_input function=%s kind=%s value=%s",
            fn.__name__,
            exc.kind,
            exc.value,
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FetchFailureError as exc:
        logger.warning("functions_router: upstream_failed function=%s detail=%s", fn.__name__, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc


def _float_or_none(value: float) -> float | None:
    return None if math.isnan(value) else value


def _number(fn: Callable[..., float], *args) -> NumberResponse:
    return NumberResponse(value=_float_or_none(_call(fn, *args)))


@router.get("/credited-rewards", response_model=NumberResponse)
def credited_rewards(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_credited_rewards, pool, address)


@router.get("/debited-rewards", response_model=NumberResponse)
def debited_rewards(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_debited_rewards, pool, address)


@router.get("/claimable-rewards", response_model=NumberResponse)
def claimable_rewards(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_claimable_rewards, pool, address)


@router.get("/seconds-until-next-claim", response_model=IntegerResponse)
def seconds_until_next_claim(
    pool: str,
    address: str,
    functions: SheetFunctions = Depends(get_sheet_functions),
):
    return IntegerResponse(value=_call(functions.get_seconds_until_next_claim, pool, address))


@router.get("/time-until-next-claim", response_model=TextResponse)
def time_until_next_claim(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=_call(functions.get_time_until_next_claim, pool, address))


@router.get("/time-since-last-claim", response_model=TextResponse)
def time_since_last_claim(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=_call(functions.get_time_since_last_claim, pool, address))


@router.get("/next-claim-date", response_model=DateResponse)
def next_claim_date(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return DateResponse(value=_call(functions.get_next_claim_date, pool, address))


@router.get("/last-claim-date", response_model=DateResponse)
def last_claim_date(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return DateResponse(value=_call(functions.get_last_claim_date, pool, address))


@router.get("/pool-info", response_model=PoolInfoResponse)
def pool_info(
    pool: str,
    address: str | None = None,
    include_abi: bool = False,
    functions: SheetFunctions = Depends(get_sheet_functions),
):
    info = _call(functions.get_pool_info, pool, address, include_abi)
    return PoolInfoResponse(
        pool=pool,
        pending_reward=_float_or_none(info.pending_reward),
        stake=_float_or_none(info.stake),
        total_stake=_float_or_none(info.total_stake),
        total_daily_reward=_float_or_none(info.total_daily_reward),
        estimated_daily_reward=_float_or_none(info.estimated_daily_reward),
        apr=_float_or_none(info.apr),
        reward_token=TokenInfoResponse(
            address=info.reward_token.address,
            name=info.reward_token.name,
            symbol=info.reward_token.symbol,
        ),
        staking_token=TokenInfoResponse(
            address=info.staking_token.address,
            name=info.staking_token.name,
            symbol=info.staking_token.symbol,
        ),
        abi=info.abi,
    )


@router.get("/pending-rewards", response_model=NumberResponse)
def pending_rewards(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_pending_rewards, pool, address)


@router.get("/stake", response_model=NumberResponse)
def stake(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_stake, pool, address)


@router.get("/total-stake", response_model=NumberResponse)
def total_stake(pool: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_total_stake, pool)


@router.get("/total-daily-rewards", response_model=NumberResponse)
def total_daily_rewards(pool: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_total_daily_rewards, pool)


@router.get("/estimated-daily-rewards", response_model=NumberResponse)
def estimated_daily_rewards(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_estimated_daily_rewards, pool, address)


@router.get("/apr", response_model=NumberResponse)
def apr(pool: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_apr, pool)


@router.get("/reward-token-address", response_model=TextResponse)
def reward_token_address(pool: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=_call(functions.get_reward_token_address, pool))


@router.get("/reward-token-symbol", response_model=TextResponse)
def reward_token_symbol(pool: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=_call(functions.get_reward_token_symbol, pool))


@router.get("/staking-token-address", response_model=TextResponse)
def staking_token_address(pool: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=_call(functions.get_staking_token_address, pool))


@router.get("/staking-token-symbol", response_model=TextResponse)
def staking_token_symbol(pool: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=_call(functions.get_staking_token_symbol, pool))


@router.get("/estimate-daily-rewards", response_model=NumberResponse)
def estimate_daily_rewards(pool: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.estimate_daily_rewards, pool, address)


@router.get("/simulate-daily-rewards", response_model=NumberResponse)
def simulate_daily_rewards(pool: str, stake: float, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.simulate_daily_rewards, pool, stake)


@router.get("/balance", response_model=NumberResponse)
def balance(token: str, address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_balance, token, address)


@router.get("/balances", response_model=BalancesResponse)
def balances(address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    result = _call(functions.get_balances, address)
    return BalancesResponse(
        address=functions.normalize_address(address),
        balances={token: _float_or_none(value) for token, value in result.items()},
    )


@router.get("/price", response_model=NumberResponse)
def price(
    token: str,
    currency: str | None = None,
    functions: SheetFunctions = Depends(get_sheet_functions),
    default_currency: str = Depends(get_default_currency),
):
    return _number(functions.get_price, token, currency or default_currency)


@router.get("/token-value", response_model=NumberResponse)
def token_value(
    token: str,
    quantity: float,
    currency: str | None = None,
    functions: SheetFunctions = Depends(get_sheet_functions),
    default_currency: str = Depends(get_default_currency),
):
    return _number(functions.get_token_value, token, quantity, currency or default_currency)


@router.get("/axs-usd-value", response_model=NumberResponse)
def axs_usd_value(quantity: float, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_axs_usd_value, quantity)


@router.get("/slp-usd-value", response_model=NumberResponse)
def slp_usd_value(quantity: float, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_slp_usd_value, quantity)


@router.get("/ron-usd-value", response_model=NumberResponse)
def ron_usd_value(quantity: float, functions: SheetFunctions = Depends(get_sheet_functions)):
    return _number(functions.get_ron_usd_value, quantity)


@router.get("/stake-value", response_model=NumberResponse)
def stake_value(
    pool: str,
    address: str,
    currency: str | None = None,
    functions: SheetFunctions = Depends(get_sheet_functions),
    default_currency: str = Depends(get_default_currency),
):
    return _number(functions.get_stake_value, pool, address, currency or default_currency)


@router.get("/format-seconds", response_model=TextResponse)
def format_seconds(seconds: int, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=functions.format_seconds(seconds))


@router.get("/normalize-address", response_model=TextResponse)
def normalize_address(address: str, functions: SheetFunctions = Depends(get_sheet_functions)):
    return TextResponse(value=functions.normalize_address(address))
