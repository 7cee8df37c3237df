# tests/test_router.py

from decimal import Decimal

import pytest

from pair_indexer.types import (
    ZERO_ADDRESS,
    PairEvent,
    Factory,
    Pair,
    Transaction,
    Mint,
    Burn,
    SkippedDuplicate,
    ordering_key,
)

from conftest import EventBuilder, PAIR, FACTORY, USER, TX1, TX2, TX3, E18, E6


class UnknownEvent(PairEvent, tag="Unknown"):
    pass


def _lifecycle(events):
    """Add liquidity, price the pair, remove part of it"""
    return [
        events.transfer(ZERO_ADDRESS, ZERO_ADDRESS, 1000, tx_hash=TX1),
        events.transfer(ZERO_ADDRESS, USER, 5 * E18, tx_hash=TX1),
        events.sync(100 * E18, 100 * E6, tx_hash=TX1),
        events.mint(5 * E18, 5 * E6, sender=USER, tx_hash=TX1),
        events.transfer(USER, PAIR, 2 * E18, tx_hash=TX2),
        events.transfer(PAIR, ZERO_ADDRESS, 2 * E18, tx_hash=TX2),
        events.sync(98 * E18, 98 * E6, tx_hash=TX2),
        events.burn(2 * E18, 2 * E6, tx_hash=TX2),
    ]


def test_lifecycle_through_router(router, events, store):
    stats = router.process_many(_lifecycle(events))

    assert stats.processed == 8
    assert stats.ok == 7
    assert stats.skipped_bootstrap == 1

    mint = store.load(Mint, f"{TX1}-0")
    assert mint.sender == USER
    assert mint.amount0 == Decimal(5)
    assert mint.amount_usd == Decimal(10)

    burn = store.load(Burn, f"{TX2}-0")
    assert not burn.needs_complete
    assert burn.amount1 == Decimal(2)

    pair = store.load(Pair, PAIR)
    assert pair.total_supply == Decimal(3)
    assert pair.reserve0 == Decimal(98)
    assert pair.total_transactions == 2

    factory = store.load(Factory, FACTORY)
    assert factory.total_liquidity_usd == Decimal(196)
    assert factory.total_transactions == 2


def test_replayed_transfer_is_skipped(router, events, store):
    transfer = events.transfer(ZERO_ADDRESS, USER, 5 * E18)

    assert router.process(transfer).is_ok
    result = router.process(transfer)

    assert not result.is_ok
    assert isinstance(result, SkippedDuplicate)
    assert result.tx_hash == TX1
    assert result.log_index == transfer.log_index
    assert store.load(Transaction, TX1).mints == [f"{TX1}-0"]
    assert store.load(Pair, PAIR).total_supply == Decimal(5)


def test_replayed_swap_is_not_counted_twice(router, events, store):
    swap = events.swap(amount0_in=E18, amount1_out=E6, tx_hash=TX3)

    stats = router.process_many([swap, swap])

    assert stats.ok == 1
    assert stats.skipped_duplicate == 1
    assert store.load(Transaction, TX3).swaps == [f"{TX3}-0"]
    assert store.load(Factory, FACTORY).total_transactions == 1


def test_sync_is_not_deduplicated(router, events, store):
    sync = events.sync(100 * E18, 100 * E6)

    stats = router.process_many([sync, sync])

    assert stats.ok == 2
    assert store.load(Factory, FACTORY).total_liquidity_usd == Decimal(200)


def test_unknown_event_type_is_rejected(router):
    event = UnknownEvent(pair=PAIR, tx_hash=TX1, tx_from=USER, block_number=1,
                         timestamp=1, log_index=0)

    with pytest.raises(TypeError):
        router.process(event)


def test_ordering_key_sorts_by_block_then_log_index():
    early = EventBuilder(block_number=5).sync(1, 1, log_index=9)
    late_low = EventBuilder(block_number=6).sync(1, 1, log_index=0)
    late_high = EventBuilder(block_number=6).sync(1, 1, log_index=3)

    ordered = sorted([late_high, early, late_low], key=ordering_key)

    assert ordered == [early, late_low, late_high]


def test_result_counts_in_stats_dict(router, events):
    stats = router.process_many([
        events.transfer(ZERO_ADDRESS, ZERO_ADDRESS, 1000),
        events.mint(E18, E6),
    ])

    assert stats.to_dict() == {
        "processed": 2,
        "ok": 0,
        "skipped_missing_dependency": 1,
        "skipped_bootstrap": 1,
        "skipped_duplicate": 0,
    }
