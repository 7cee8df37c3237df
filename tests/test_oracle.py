# tests/test_oracle.py

from decimal import Decimal

import pytest

from pair_indexer.database.store import InMemoryEntityStore
from pair_indexer.pricing import StorePriceOracle
from pair_indexer.types import Pair, Token, PricingConfig

WBNB = "0x00000000000000000000000000000000000000b0"
BUSD = "0x00000000000000000000000000000000000000b1"
CAKE = "0x00000000000000000000000000000000000000c0"
MEME = "0x00000000000000000000000000000000000000d0"
WBNB_BUSD = "0x00000000000000000000000000000000000000f1"


@pytest.fixture
def price_store():
    store = InMemoryEntityStore()
    # token0 = WBNB, token1 = BUSD; token1_price is BUSD per WBNB
    store.save(Pair(id=WBNB_BUSD, token0=WBNB, token1=BUSD,
                    token0_price=Decimal("0.004"), token1_price=Decimal("250")))
    return store


@pytest.fixture
def price_oracle(price_store):
    return StorePriceOracle(price_store, PricingConfig(
        reference_pair=WBNB_BUSD,
        reference_token=WBNB,
        stablecoins=[BUSD],
        whitelist=[CAKE],
    ))


def _token(address, derived_usd="0"):
    return Token(id=address, derived_usd=Decimal(derived_usd))


def test_reference_price_from_reference_pair(price_oracle):
    assert price_oracle.get_bnb_price_in_usd() == Decimal(250)


def test_reference_price_without_reference_pair():
    oracle = StorePriceOracle(InMemoryEntityStore(), PricingConfig(reference_pair=WBNB_BUSD,
                                                                   reference_token=WBNB))
    assert oracle.get_bnb_price_in_usd() == 0


def test_token_priced_against_stablecoin(price_oracle):
    prices = price_oracle.derive_usd_price(Decimal(10), Decimal(25), _token(CAKE), _token(BUSD))

    assert prices.token0_price_usd == Decimal("2.5")
    assert prices.token1_price_usd == Decimal(1)


def test_token_priced_against_reference_token(price_oracle):
    prices = price_oracle.derive_usd_price(Decimal(1), Decimal(1000), _token(WBNB), _token(MEME))

    assert prices.token0_price_usd == Decimal(250)
    assert prices.token1_price_usd == Decimal("0.25")


def test_token_priced_through_whitelisted_counterpart(price_oracle):
    prices = price_oracle.derive_usd_price(Decimal(100), Decimal(10), _token(MEME), _token(CAKE, "3"))

    assert prices.token0_price_usd == Decimal("0.3")


def test_unpriceable_pair(price_oracle):
    prices = price_oracle.derive_usd_price(Decimal(100), Decimal(10), _token(MEME), _token(CAKE))

    assert prices.token0_price_usd == 0
    assert prices.token1_price_usd == 0


def test_empty_reserve_gives_zero_price(price_oracle):
    prices = price_oracle.derive_usd_price(Decimal(0), Decimal(10), _token(MEME), _token(BUSD))

    assert prices.token0_price_usd == 0


def test_tracked_volume(price_oracle):
    cake = _token(CAKE, "2")
    busd = _token(BUSD, "1")
    meme = _token(MEME, "5")

    assert price_oracle.get_tracked_volume_usd(Decimal(10), cake, Decimal(18), busd) == Decimal(19)
    assert price_oracle.get_tracked_volume_usd(Decimal(10), cake, Decimal(4), meme) == Decimal(20)
    assert price_oracle.get_tracked_volume_usd(Decimal(10), meme, Decimal(4), _token(MEME, "5")) == 0


def test_tracked_liquidity(price_oracle):
    cake = _token(CAKE, "2")
    busd = _token(BUSD, "1")
    meme = _token(MEME, "5")

    assert price_oracle.get_tracked_liquidity_usd(Decimal(10), cake, Decimal(18), busd) == Decimal(38)
    assert price_oracle.get_tracked_liquidity_usd(Decimal(4), meme, Decimal(10), cake) == Decimal(40)
    assert price_oracle.get_tracked_liquidity_usd(Decimal(4), meme, Decimal(4), meme) == 0
