from __future__ import annotations

from typing import Protocol

from axie_sheets.domain.entities.identifiers import Currency, PoolId, TokenId
from axie_sheets.domain.entities.staking import PoolInfo, PriceData, RewardInfo


class AxieApiPort(Protocol):
    def fetch_user_info(self, *, pool: PoolId, address: str) -> RewardInfo:
        ...

    def fetch_pools(
        self,
        *,
        address: str | None = None,
        include_abi: bool = False,
    ) -> dict[str, PoolInfo]:
        ...

    def fetch_balance(self, *, token: TokenId, address: str) -> float:
        ...

    def fetch_balances(self, *, address: str) -> dict[str, float]:
        ...

    def fetch_prices(self, *, currency: Currency) -> PriceData:
        ...
