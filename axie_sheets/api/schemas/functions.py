from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class NumberResponse(BaseModel):
    value: float | None = Field(None, description="Numeric result; null when the upstream value is not numeric.")


class IntegerResponse(BaseModel):
    value: int


class TextResponse(BaseModel):
    value: str | None


class DateResponse(BaseModel):
    value: datetime


class BalancesResponse(BaseModel):
    address: str
    balances: dict[str, float | None]


class TokenInfoResponse(BaseModel):
    address: str
    name: str
    symbol: str


class PoolInfoResponse(BaseModel):
    pool: str
    pending_reward: float | None
    stake: float | None
    total_stake: float | None
    total_daily_reward: float | None
    estimated_daily_reward: float | None
    apr: float | None
    reward_token: TokenInfoResponse
    staking_token: TokenInfoResponse
    abi: Any | None = None
