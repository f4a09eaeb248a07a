from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from axie_sheets.domain.services.projections import (
    currency_value,
    estimate_daily_rewards,
    format_seconds,
    parse_float,
    timestamp_to_datetime,
)


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "00"),
        (5, "05"),
        (59, "59"),
        (65, "01:05"),
        (600, "10:00"),
        (3600, "01:00:00"),
        (3661, "01:01:01"),
        (90000, "25:00:00"),
    ],
)
def test_format_seconds_drops_leading_zero_segments(seconds: int, expected: str):
    assert format_seconds(seconds) == expected


def test_format_seconds_clamps_negative_to_zero():
    assert format_seconds(-30) == "00"


def test_parse_float_reads_numbers_and_numeric_strings():
    assert parse_float(3) == 3.0
    assert parse_float("12.5") == 12.5
    assert parse_float(" 1e3 ") == 1000.0
    assert parse_float("42.7 AXS") == 42.7


@pytest.mark.parametrize("value", ["abc", "", None, True, {"x": 1}])
def test_parse_float_returns_nan_for_non_numeric(value):
    assert math.isnan(parse_float(value))


def test_timestamp_to_datetime_is_utc():
    assert timestamp_to_datetime(1_700_000_000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def test_estimate_daily_rewards_is_pro_rata():
    assert estimate_daily_rewards(stake=50, total_stake=200, total_daily_reward=40) == 10


def test_estimate_daily_rewards_without_total_stake_is_zero():
    assert estimate_daily_rewards(stake=50, total_stake=0, total_daily_reward=40) == 0.0


def test_currency_value_multiplies_quantity_by_price():
    assert currency_value(3, 5.0) == 15.0
