# tests/test_sql_store.py

from decimal import Decimal

import pytest

from pair_indexer.database import DatabaseManager, SqlEntityStore
from pair_indexer.seed import seed_entities
from pair_indexer.transform import PairEventRouter
from pair_indexer.types import (
    DEFAULT_BUNDLE_ID,
    ZERO_ADDRESS,
    DatabaseConfig,
    Factory,
    Pair,
    Token,
    Transaction,
    Mint,
    Burn,
    Swap,
    PairDayData,
)

from conftest import FixedPriceOracle, default_seed, PAIR, TOKEN_A, FACTORY, USER, FEE_TO, TX1, TX2, E18, E6


@pytest.fixture
def db_manager():
    manager = DatabaseManager(DatabaseConfig(url="sqlite://"))
    manager.initialize()
    manager.create_schema()
    yield manager
    manager.shutdown()


@pytest.fixture
def sql_store(db_manager):
    store = SqlEntityStore(db_manager)
    seed_entities(store, default_seed(), FACTORY, DEFAULT_BUNDLE_ID)
    return store


def test_seeded_records_load(sql_store):
    assert sql_store.load(Factory, FACTORY).pair_count == 1
    assert sql_store.load(Token, TOKEN_A).decimals == 18
    assert sql_store.load(Pair, PAIR).token0 == TOKEN_A
    assert sql_store.load(Pair, "0x" + "00" * 20) is None


def test_decimals_round_trip_exactly(sql_store):
    token = sql_store.load(Token, TOKEN_A)
    token.derived_usd = Decimal("0.000000000000000001")
    token.trade_volume = Decimal("123456789012345678901234.5")
    sql_store.save(token)

    loaded = sql_store.load(Token, TOKEN_A)
    assert loaded.derived_usd == Decimal("0.000000000000000001")
    assert loaded.trade_volume == Decimal("123456789012345678901234.5")


def test_transaction_sequences_round_trip(sql_store):
    transaction = Transaction(id=TX1, block_number=7, timestamp=1000)
    transaction.append_mint(transaction.next_mint_id())
    transaction.append_burn(transaction.next_burn_id())
    transaction.mark_applied(3)
    sql_store.save(transaction)

    loaded = sql_store.load(Transaction, TX1)
    assert loaded.mints == [f"{TX1}-0"]
    assert loaded.burns == [f"{TX1}-0"]
    assert loaded.swaps == []
    assert loaded.mint_count == 1
    assert loaded.log_indexes == [3]


def test_swap_originator_column(sql_store):
    swap = Swap(id=f"{TX1}-0", transaction=TX1, timestamp=1, pair=PAIR, sender=USER, to=USER,
                from_=FEE_TO, amount0_in=Decimal(1), amount1_in=Decimal(0),
                amount0_out=Decimal(0), amount1_out=Decimal("0.5"),
                amount_usd=Decimal("0.75"), log_index=4)
    sql_store.save(swap)

    assert sql_store.load(Swap, f"{TX1}-0") == swap


def test_remove(sql_store):
    mint = Mint(id=f"{TX1}-0", transaction=TX1, timestamp=1, pair=PAIR, to=USER, liquidity=Decimal(1))
    sql_store.save(mint)

    assert sql_store.remove(Mint, mint.id) is True
    assert sql_store.load(Mint, mint.id) is None
    assert sql_store.remove(Mint, mint.id) is False


def test_list_orders_by_id(sql_store):
    assert [token.symbol for token in sql_store.list(Token)] == ["AAA", "BBB"]


def test_unknown_entity_type_is_rejected(sql_store):
    with pytest.raises(TypeError):
        sql_store.load(FixedPriceOracle, "x")


def test_router_against_sql_store(sql_store, events):
    router = PairEventRouter(sql_store, FixedPriceOracle(), FACTORY, DEFAULT_BUNDLE_ID)

    stats = router.process_many([
        events.transfer(ZERO_ADDRESS, USER, 5 * E18, tx_hash=TX1),
        events.sync(5 * E18, 5 * E6, tx_hash=TX1),
        events.mint(5 * E18, 5 * E6, sender=USER, tx_hash=TX1),
        events.transfer(USER, PAIR, 2 * E18, tx_hash=TX2),
        events.transfer(ZERO_ADDRESS, FEE_TO, 10 ** 15, tx_hash=TX2),
        events.transfer(PAIR, ZERO_ADDRESS, 2 * E18, tx_hash=TX2),
        events.burn(2 * E18, 2 * E6, tx_hash=TX2),
    ])

    assert stats.ok == 7

    burn = sql_store.load(Burn, f"{TX2}-0")
    assert burn.fee_to == FEE_TO
    assert burn.fee_liquidity == Decimal("0.001")
    assert burn.amount0 == Decimal(2)
    assert not burn.needs_complete
    assert sql_store.load(Mint, f"{TX2}-0") is None
    assert sql_store.load(Transaction, TX2).mints == []

    assert sql_store.load(Mint, f"{TX1}-0").amount_usd == Decimal(10)
    assert len(sql_store.list(PairDayData)) == 1
