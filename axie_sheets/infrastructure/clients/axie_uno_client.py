from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import httpx

from axie_sheets.application.ports.axie_api_port import AxieApiPort
from axie_sheets.domain.entities.identifiers import TOKENS, Currency, PoolId, TokenId
from axie_sheets.domain.entities.staking import PoolInfo, PriceData, RewardInfo, TokenInfo
from axie_sheets.domain.exceptions import DecodeFailureError, FetchFailureError
from axie_sheets.domain.services.projections import parse_float, timestamp_to_datetime


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxieUnoClientSettings:
    api_base: str
    timeout_seconds: float


class AxieUnoClient(AxieApiPort):
    def __init__(
        self,
        settings: AxieUnoClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def fetch_user_info(self, *, pool: PoolId, address: str) -> RewardInfo:
        payload = self._get_json("/userInfo", params={"pool": pool, "player": address})
        info = _require_object(payload, path="/userInfo")
        reward_info = RewardInfo(
            credited_reward=parse_float(_field(info, "credited_reward", path="/userInfo")),
            debited_reward=parse_float(_field(info, "debited_reward", path="/userInfo")),
            seconds_since_last_claim=_int_field(info, "seconds_since_last_claim", path="/userInfo"),
            seconds_until_next_claim=_int_field(info, "seconds_until_next_claim", path="/userInfo"),
            last_claim_timestamp=_timestamp_field(info, "last_claim_timestamp", path="/userInfo"),
            next_claim_timestamp=_timestamp_field(info, "next_claim_timestamp", path="/userInfo"),
        )
        logger.info("axie_uno_client: fetched_user_info pool=%s player=%s", pool, address)
        return reward_info

    def fetch_pools(
        self,
        *,
        address: str | None = None,
        include_abi: bool = False,
    ) -> dict[str, PoolInfo]:
        params = {"includeAbi": "true" if include_abi else "false"}
        if address is not None:
            params["player"] = address
        payload = _require_object(self._get_json("/pools", params=params), path="/pools")

        pools: dict[str, PoolInfo] = {}
        for pool_id, raw in payload.items():
            pool_path = f"/pools[{pool_id}]"
            row = _require_object(raw, path=pool_path)
            pools[pool_id] = PoolInfo(
                pending_reward=parse_float(row.get("pending_reward")),
                stake=parse_float(row.get("stake")),
                total_stake=parse_float(_field(row, "total_stake", path=pool_path)),
                total_daily_reward=parse_float(_field(row, "total_daily_reward", path=pool_path)),
                estimated_daily_reward=parse_float(row.get("estimated_daily_reward")),
                apr=parse_float(_field(row, "apr", path=pool_path)),
                reward_token=_token_info(
                    _field(row, "reward_token", path=pool_path),
                    path=f"{pool_path}.reward_token",
                ),
                staking_token=_token_info(
                    _field(row, "staking_token", path=pool_path),
                    path=f"{pool_path}.staking_token",
                ),
                abi=row.get("abi") if include_abi else None,
            )

        logger.info(
            "axie_uno_client: fetched_pools pools=%s player=%s include_abi=%s",
            len(pools),
            address,
            include_abi,
        )
        return pools

    def fetch_balance(self, *, token: TokenId, address: str) -> float:
        payload = _require_object(
            self._get_json("/balance", params={"player": address, "token": token}),
            path="/balance",
        )
        balance = parse_float(_field(payload, "balance", path="/balance"))
        logger.info("axie_uno_client: fetched_balance token=%s player=%s", token, address)
        return balance

    def fetch_balances(self, *, address: str) -> dict[str, float]:
        return {token: self.fetch_balance(token=token, address=address) for token in TOKENS}

    def fetch_prices(self, *, currency: Currency) -> PriceData:
        payload = _require_object(
            self._get_json("/prices", params={"currency": currency}),
            path="/prices",
        )
        prices = {str(symbol).upper(): parse_float(value) for symbol, value in payload.items()}
        logger.info("axie_uno_client: fetched_prices currency=%s symbols=%s", currency, len(prices))
        return PriceData(currency=currency, prices=prices)

    def _get_json(self, path: str, *, params: dict[str, str]) -> Any:
        url = f"{self._settings.api_base.rstrip('/')}{path}"
        try:
            with httpx.Client(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("axie_uno_client: fetch_failed path=%s error=%s", path, exc)
            raise FetchFailureError(f"Request to {path} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("axie_uno_client: decode_failed path=%s error=%s", path, exc)
            raise DecodeFailureError(f"Response from {path} is not valid JSON.") from exc


def _require_object(value: Any, *, path: str) -> dict:
    if not isinstance(value, dict):
        raise DecodeFailureError(f"Expected a JSON object at {path}.")
    return value


def _field(row: dict, name: str, *, path: str) -> Any:
    if name not in row:
        raise DecodeFailureError(f"Missing field '{name}' at {path}.")
    return row[name]


def _int_field(row: dict, name: str, *, path: str) -> int:
    value = _field(row, name, path=path)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeFailureError(f"Field '{name}' at {path} is not an integer: {value!r}")
    return value


def _timestamp_field(row: dict, name: str, *, path: str) -> int:
    value = _int_field(row, name, path=path)
    try:
        timestamp_to_datetime(value)
    except (OverflowError, OSError, ValueError) as exc:
        raise DecodeFailureError(f"Field '{name}' at {path} is not a valid unix timestamp: {value!r}") from exc
    return value


def _str_field(row: dict, name: str, *, path: str) -> str:
    value = _field(row, name, path=path)
    if not isinstance(value, str):
        raise DecodeFailureError(f"Field '{name}' at {path} is not a string: {value!r}")
    return value


def _token_info(value: Any, *, path: str) -> TokenInfo:
    row = _require_object(value, path=path)
    return TokenInfo(
        address=_str_field(row, "address", path=path),
        name=_str_field(row, "name", path=path),
        symbol=_str_field(row, "symbol", path=path),
    )
