# tests/conftest.py
"""
pytest fixtures for the pair event handlers

Every test runs against a fresh in-memory store seeded with one factory, the
price bundle, two tokens (A with 18 decimals, B with 6) and the pair P = A/B.
"""

from decimal import Decimal

import pytest

from pair_indexer.database.store import InMemoryEntityStore
from pair_indexer.pricing.interfaces import PriceOracle, UsdPrices
from pair_indexer.seed import seed_entities
from pair_indexer.transform import (
    PeriodAggregator,
    TransactionAssembler,
    ReserveUpdater,
    SwapRecorder,
    PairEventRouter,
)
from pair_indexer.types import (
    DEFAULT_BUNDLE_ID,
    SeedConfig,
    TokenSeed,
    PairSeed,
    TransferEvent,
    MintEvent,
    BurnEvent,
    SwapEvent,
    SyncEvent,
)

FACTORY = "0x00000000000000000000000000000000000000fa"
PAIR = "0x000000000000000000000000000000000000beef"
TOKEN_A = "0x000000000000000000000000000000000000000a"
TOKEN_B = "0x000000000000000000000000000000000000000b"
USER = "0x0000000000000000000000000000000000001234"
FEE_TO = "0x0000000000000000000000000000000000000fee"
ROUTER = "0x0000000000000000000000000000000000000777"

TX1 = "0x" + "11" * 32
TX2 = "0x" + "22" * 32
TX3 = "0x" + "33" * 32

# 2023-11-14 22:13:20 UTC
TS = 1_700_000_000

E18 = 10 ** 18
E6 = 10 ** 6


class FixedPriceOracle(PriceOracle):
    """Oracle with preset prices; every token counts as tracked"""

    def __init__(self, token0_usd=Decimal("1"), token1_usd=Decimal("1"), bnb_usd=Decimal("300")):
        self.token0_usd = Decimal(token0_usd)
        self.token1_usd = Decimal(token1_usd)
        self.bnb_usd = Decimal(bnb_usd)

    def get_bnb_price_in_usd(self) -> Decimal:
        return self.bnb_usd

    def derive_usd_price(self, reserve0, reserve1, token0, token1) -> UsdPrices:
        return UsdPrices(token0_price_usd=self.token0_usd, token1_price_usd=self.token1_usd)

    def get_tracked_volume_usd(self, amount0, token0, amount1, token1) -> Decimal:
        return (amount0 * self.token0_usd + amount1 * self.token1_usd) / 2

    def get_tracked_liquidity_usd(self, reserve0, token0, reserve1, token1) -> Decimal:
        return reserve0 * self.token0_usd + reserve1 * self.token1_usd


class EventBuilder:
    """Builds pair events with increasing log indexes"""

    def __init__(self, pair=PAIR, block_number=100, timestamp=TS):
        self.pair = pair
        self.block_number = block_number
        self.timestamp = timestamp
        self.log_index = 0

    def _common(self, tx_hash, **overrides):
        common = dict(
            pair=self.pair,
            tx_hash=tx_hash,
            tx_from=USER,
            block_number=self.block_number,
            timestamp=self.timestamp,
            log_index=self.log_index,
        )
        common.update(overrides)
        self.log_index += 1
        return common

    def transfer(self, from_, to, value, tx_hash=TX1, **overrides):
        return TransferEvent(from_=from_, to=to, value=value, **self._common(tx_hash, **overrides))

    def mint(self, amount0, amount1, sender=ROUTER, tx_hash=TX1, **overrides):
        return MintEvent(sender=sender, amount0=amount0, amount1=amount1,
                         **self._common(tx_hash, **overrides))

    def burn(self, amount0, amount1, tx_hash=TX1, **overrides):
        return BurnEvent(amount0=amount0, amount1=amount1,
                         **self._common(tx_hash, **overrides))

    def swap(self, amount0_in=0, amount1_in=0, amount0_out=0, amount1_out=0,
             sender=ROUTER, to=USER, tx_hash=TX1, **overrides):
        return SwapEvent(sender=sender, to=to,
                         amount0_in=amount0_in, amount1_in=amount1_in,
                         amount0_out=amount0_out, amount1_out=amount1_out,
                         **self._common(tx_hash, **overrides))

    def sync(self, reserve0, reserve1, tx_hash=TX1, **overrides):
        return SyncEvent(reserve0=reserve0, reserve1=reserve1, **self._common(tx_hash, **overrides))


def default_seed() -> SeedConfig:
    return SeedConfig(
        tokens=[
            TokenSeed(address=TOKEN_A, decimals=18, symbol="AAA", name="Token A"),
            TokenSeed(address=TOKEN_B, decimals=6, symbol="BBB", name="Token B"),
        ],
        pairs=[
            PairSeed(address=PAIR, token0=TOKEN_A, token1=TOKEN_B, block_number=1, timestamp=TS - 86400),
        ],
    )


@pytest.fixture
def store():
    store = InMemoryEntityStore()
    seed_entities(store, default_seed(), FACTORY, DEFAULT_BUNDLE_ID)
    return store


@pytest.fixture
def oracle():
    return FixedPriceOracle()


@pytest.fixture
def events():
    return EventBuilder()


@pytest.fixture
def aggregator(store):
    return PeriodAggregator(store)


@pytest.fixture
def assembler(store, aggregator):
    return TransactionAssembler(store, aggregator, FACTORY, DEFAULT_BUNDLE_ID)


@pytest.fixture
def reserves(store, oracle):
    return ReserveUpdater(store, oracle, FACTORY, DEFAULT_BUNDLE_ID)


@pytest.fixture
def swaps(store, oracle, aggregator):
    return SwapRecorder(store, oracle, aggregator, FACTORY, DEFAULT_BUNDLE_ID)


@pytest.fixture
def router(store, oracle):
    return PairEventRouter(store, oracle, FACTORY, DEFAULT_BUNDLE_ID)
