from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class RewardInfo:
    credited_reward: float
    debited_reward: float
    seconds_since_last_claim: int
    seconds_until_next_claim: int
    last_claim_timestamp: int
    next_claim_timestamp: int


@dataclass(frozen=True)
class TokenInfo:
    address: str
    name: str
    symbol: str


@dataclass(frozen=True)
class PoolInfo:
    pending_reward: float
    stake: float
    total_stake: float
    total_daily_reward: float
    estimated_daily_reward: float
    apr: float
    reward_token: TokenInfo
    staking_token: TokenInfo
    abi: Any | None = None


@dataclass(frozen=True)
class PriceData:
    currency: str
    prices: Mapping[str, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def price_of(self, symbol: str) -> float | None:
        return self.prices.get(symbol.upper())
