# tests/test_swaps.py

from decimal import Decimal

from pair_indexer.database.types import PeriodType
from pair_indexer.types import (
    DEFAULT_BUNDLE_ID,
    Bundle,
    Factory,
    Pair,
    Token,
    Transaction,
    Swap,
    PairDayData,
    PairHourData,
    TokenDayData,
    FactoryDayData,
    Ok,
    SkippedMissingDependency,
)

from conftest import PAIR, TOKEN_A, TOKEN_B, FACTORY, USER, ROUTER, TX1, TS, E18, E6

DAY = PeriodType.ONE_DAY.period_index(TS)
HOUR = PeriodType.ONE_HOUR.period_index(TS)


def _priced_swap(reserves, swaps, events):
    reserves.handle_sync(events.sync(100 * E18, 100 * E6))
    return swaps.handle_swap(events.swap(amount0_in=10 * E18, amount1_out=9_900_000))


def test_swap_updates_volumes(reserves, swaps, events, store):
    result = _priced_swap(reserves, swaps, events)

    assert isinstance(result, Ok)
    tracked = Decimal("9.95")

    token_a = store.load(Token, TOKEN_A)
    token_b = store.load(Token, TOKEN_B)
    assert token_a.trade_volume == Decimal(10)
    assert token_b.trade_volume == Decimal("9.9")
    assert token_a.trade_volume_usd == tracked
    assert token_b.trade_volume_usd == tracked
    assert token_a.total_transactions == 1

    pair = store.load(Pair, PAIR)
    assert pair.volume_usd == tracked
    assert pair.volume_token0 == Decimal(10)
    assert pair.volume_token1 == Decimal("9.9")
    assert pair.total_transactions == 1

    factory = store.load(Factory, FACTORY)
    assert factory.total_volume_usd == tracked
    assert factory.total_transactions == 1


def test_swap_record(reserves, swaps, events, store):
    _priced_swap(reserves, swaps, events)

    transaction = store.load(Transaction, TX1)
    assert transaction.swaps == [f"{TX1}-0"]

    swap = store.load(Swap, f"{TX1}-0")
    assert swap.sender == ROUTER
    assert swap.to == USER
    assert swap.from_ == USER
    assert swap.amount0_in == Decimal(10)
    assert swap.amount1_in == 0
    assert swap.amount0_out == 0
    assert swap.amount1_out == Decimal("9.9")
    assert swap.amount_usd == Decimal("9.95")
    assert swap.log_index == 1
    assert swap.timestamp == TS


def test_swaps_in_one_transaction_get_distinct_ids(swaps, events, store):
    swaps.handle_swap(events.swap(amount0_in=E18, amount1_out=E6))
    swaps.handle_swap(events.swap(amount1_in=E6, amount0_out=E18))

    transaction = store.load(Transaction, TX1)
    assert transaction.swaps == [f"{TX1}-0", f"{TX1}-1"]
    assert transaction.swap_count == 2


def test_swap_folds_volume_into_buckets(reserves, swaps, events, store):
    _priced_swap(reserves, swaps, events)

    pair_day = store.load(PairDayData, f"{PAIR}-{DAY}")
    assert pair_day.daily_volume_token0 == Decimal(10)
    assert pair_day.daily_volume_token1 == Decimal("9.9")
    assert pair_day.daily_volume_usd == Decimal("9.95")
    assert pair_day.daily_txns == 1
    assert pair_day.reserve_usd == Decimal(200)

    pair_hour = store.load(PairHourData, f"{PAIR}-{HOUR}")
    assert pair_hour.hourly_volume_usd == Decimal("9.95")
    assert pair_hour.hourly_txns == 1

    factory_day = store.load(FactoryDayData, str(DAY))
    assert factory_day.daily_volume_usd == Decimal("9.95")
    assert factory_day.total_volume_usd == Decimal("9.95")
    assert factory_day.total_transactions == 1
    assert factory_day.daily_transactions == 1

    # token buckets value their own leg
    token_a_day = store.load(TokenDayData, f"{TOKEN_A}-{DAY}")
    token_b_day = store.load(TokenDayData, f"{TOKEN_B}-{DAY}")
    assert token_a_day.daily_volume_token == Decimal(10)
    assert token_a_day.daily_volume_usd == Decimal(10)
    assert token_b_day.daily_volume_usd == Decimal("9.9")
    assert token_a_day.price_usd == Decimal(1)


def test_swap_without_bundle_is_skipped(swaps, events, store):
    store.remove(Bundle, DEFAULT_BUNDLE_ID)

    result = swaps.handle_swap(events.swap(amount0_in=E18, amount1_out=E6))

    assert isinstance(result, SkippedMissingDependency)
    assert result.entity_kind == "Bundle"
    assert store.load(Transaction, TX1) is None
    assert store.load(Pair, PAIR).volume_token0 == 0
