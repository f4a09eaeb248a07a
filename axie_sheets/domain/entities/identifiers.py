from __future__ import annotations

from typing import Literal, get_args


PoolId = Literal["AXS", "AXS-WETH", "SLP-WETH", "RON-WETH"]

TokenId = Literal[
    "AXS",
    "SLP",
    "RON",
    "WETH",
    "USDC",
    "AXS-WETH",
    "SLP-WETH",
    "RON-WETH",
]

Currency = Literal[
    "usd",
    "eur",
    "gbp",
    "jpy",
    "cad",
    "aud",
    "chf",
    "cny",
    "krw",
    "inr",
    "brl",
    "mxn",
    "ars",
    "php",
    "vnd",
    "idr",
    "myr",
    "thb",
    "sgd",
    "rub",
    "try",
    "btc",
    "eth",
]

POOLS: tuple[str, ...] = get_args(PoolId)
TOKENS: tuple[str, ...] = get_args(TokenId)
CURRENCIES: tuple[str, ...] = get_args(Currency)
