from __future__ import annotations

import pytest

from axie_sheets.domain.entities.identifiers import CURRENCIES, POOLS, TOKENS
from axie_sheets.domain.exceptions import InvalidEnumError
from axie_sheets.domain.services.address import normalize_address
from axie_sheets.domain.services.validation import (
    validate_currency,
    validate_pool,
    validate_token,
)


def test_normalize_address_rewrites_ronin_prefix():
    assert normalize_address("ronin:abc123") == "0xabc123"


def test_normalize_address_only_rewrites_leading_prefix():
    assert normalize_address("0xronin:abc") == "0xronin:abc"


def test_normalize_address_keeps_hex_address():
    assert normalize_address("0xabc123") == "0xabc123"


def test_normalize_address_passes_none_through():
    assert normalize_address(None) is None


def test_allow_lists_keep_declaration_order():
    assert POOLS == ("AXS", "AXS-WETH", "SLP-WETH", "RON-WETH")
    assert TOKENS[:3] == ("AXS", "SLP", "RON")
    assert CURRENCIES[0] == "usd"


def test_valid_values_are_returned():
    assert validate_pool("SLP-WETH") == "SLP-WETH"
    assert validate_token("RON") == "RON"
    assert validate_currency("eur") == "eur"


def test_invalid_pool_lists_all_valid_pools():
    with pytest.raises(InvalidEnumError) as exc_info:
        validate_pool("DOGE")

    assert exc_info.value.kind == "pool"
    assert exc_info.value.value == "DOGE"
    assert exc_info.value.valid_values == POOLS
    assert str(exc_info.value) == "Invalid pool 'DOGE'. Valid values: AXS, AXS-WETH, SLP-WETH, RON-WETH."


def test_currency_validation_is_case_sensitive():
    with pytest.raises(InvalidEnumError):
        validate_currency("USD")


def test_non_string_token_is_rejected():
    with pytest.raises(InvalidEnumError):
        validate_token(None)
