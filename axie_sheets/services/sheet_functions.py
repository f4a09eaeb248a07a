from __future__ import annotations

import math
from datetime import datetime

from axie_sheets.application.ports.axie_api_port import AxieApiPort
from axie_sheets.domain.entities.identifiers import PoolId
from axie_sheets.domain.entities.staking import PoolInfo, RewardInfo
from axie_sheets.domain.exceptions import DecodeFailureError
from axie_sheets.domain.services import projections
from axie_sheets.domain.services.address import normalize_address
from axie_sheets.domain.services.validation import (
    validate_currency,
    validate_pool,
    validate_token,
)


class SheetFunctions:
    """Spreadsheet-style functions over the staking API.

    Every method takes primitive arguments, validates identifiers before any
    request is made, normalizes the player address and issues a fresh fetch.
    """

    def __init__(self, *, api_port: AxieApiPort):
        self._api_port = api_port

    # Rewards

    def get_credited_rewards(self, pool: str, address: str) -> float:
        return self._user_info(pool, address).credited_reward

    def get_debited_rewards(self, pool: str, address: str) -> float:
        return self._user_info(pool, address).debited_reward

    def get_claimable_rewards(self, pool: str, address: str) -> float:
        info = self._user_info(pool, address)
        return info.credited_reward - info.debited_reward

    def get_seconds_until_next_claim(self, pool: str, address: str) -> int:
        return self._user_info(pool, address).seconds_until_next_claim

    def get_time_until_next_claim(self, pool: str, address: str) -> str:
        return projections.format_seconds(self._user_info(pool, address).seconds_until_next_claim)

    def get_time_since_last_claim(self, pool: str, address: str) -> str:
        return projections.format_seconds(self._user_info(pool, address).seconds_since_last_claim)

    def get_next_claim_date(self, pool: str, address: str) -> datetime:
        return projections.timestamp_to_datetime(self._user_info(pool, address).next_claim_timestamp)

    def get_last_claim_date(self, pool: str, address: str) -> datetime:
        return projections.timestamp_to_datetime(self._user_info(pool, address).last_claim_timestamp)

    # Pools

    def get_pool_info(self, pool: str, address: str | None = None, include_abi: bool = False) -> PoolInfo:
        return self._pool(pool, address, include_abi=include_abi)

    def get_pending_rewards(self, pool: str, address: str) -> float:
        return self._pool(pool, address).pending_reward

    def get_stake(self, pool: str, address: str) -> float:
        return self._pool(pool, address).stake

    def get_total_stake(self, pool: str) -> float:
        return self._pool(pool, None).total_stake

    def get_total_daily_rewards(self, pool: str) -> float:
        return self._pool(pool, None).total_daily_reward

    def get_estimated_daily_rewards(self, pool: str, address: str) -> float:
        return self._pool(pool, address).estimated_daily_reward

    def get_apr(self, pool: str) -> float:
        return self._pool(pool, None).apr

    def get_reward_token_address(self, pool: str) -> str:
        return self._pool(pool, None).reward_token.address

    def get_reward_token_symbol(self, pool: str) -> str:
        return self._pool(pool, None).reward_token.symbol

    def get_staking_token_address(self, pool: str) -> str:
        return self._pool(pool, None).staking_token.address

    def get_staking_token_symbol(self, pool: str) -> str:
        return self._pool(pool, None).staking_token.symbol

    def estimate_daily_rewards(self, pool: str, address: str) -> float:
        info = self._pool(pool, address)
        return projections.estimate_daily_rewards(
            stake=info.stake,
            total_stake=info.total_stake,
            total_daily_reward=info.total_daily_reward,
        )

    def simulate_daily_rewards(self, pool: str, stake: float) -> float:
        info = self._pool(pool, None)
        return projections.estimate_daily_rewards(
            stake=projections.parse_float(stake),
            total_stake=info.total_stake,
            total_daily_reward=info.total_daily_reward,
        )

    # Balances

    def get_balance(self, token: str, address: str) -> float:
        token_id = validate_token(token)
        return self._api_port.fetch_balance(token=token_id, address=normalize_address(address))

    def get_balances(self, address: str) -> dict[str, float]:
        return self._api_port.fetch_balances(address=normalize_address(address))

    # Prices

    def get_price(self, token: str, currency: str = "usd") -> float:
        token_id = validate_token(token)
        currency_code = validate_currency(currency)
        prices = self._api_port.fetch_prices(currency=currency_code)
        price = prices.price_of(token_id)
        return math.nan if price is None else price

    def get_token_value(self, token: str, quantity: float, currency: str = "usd") -> float:
        return projections.currency_value(
            projections.parse_float(quantity),
            self.get_price(token, currency),
        )

    def get_axs_usd_value(self, quantity: float) -> float:
        return self.get_token_value("AXS", quantity)

    def get_slp_usd_value(self, quantity: float) -> float:
        return self.get_token_value("SLP", quantity)

    def get_ron_usd_value(self, quantity: float) -> float:
        return self.get_token_value("RON", quantity)

    def get_stake_value(self, pool: str, address: str, currency: str = "usd") -> float:
        currency_code = validate_currency(currency)
        info = self._pool(pool, address)
        price = self._api_port.fetch_prices(currency=currency_code).price_of(info.staking_token.symbol)
        return projections.currency_value(info.stake, math.nan if price is None else price)

    # Utilities

    def format_seconds(self, seconds: int) -> str:
        return projections.format_seconds(seconds)

    def normalize_address(self, address: str | None) -> str | None:
        return normalize_address(address)

    def _user_info(self, pool: str, address: str) -> RewardInfo:
        pool_id = validate_pool(pool)
        return self._api_port.fetch_user_info(pool=pool_id, address=normalize_address(address))

    def _pool(self, pool: str, address: str | None, *, include_abi: bool = False) -> PoolInfo:
        pool_id: PoolId = validate_pool(pool)
        pools = self._api_port.fetch_pools(
            address=normalize_address(address),
            include_abi=include_abi,
        )
        info = pools.get(pool_id)
        if info is None:
            raise DecodeFailureError(f"Pool '{pool_id}' missing from /pools response.")
        return info
