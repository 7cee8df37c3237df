# pair_indexer/transform/reserves.py

from .base import PairHandler
from ..database.store import EntityStore
from ..pricing.interfaces import PriceOracle
from ..types import (
    ZERO_BD,
    EvmAddress,
    SyncEvent,
    Factory,
    Bundle,
    Pair,
    Token,
    HandlerResult,
)
from ..utils.amounts import convert_token_to_decimal, safe_div


class ReserveUpdater(PairHandler):
    """
    Applies Sync events to pair reserves, prices and liquidity totals.

    Tracked liquidity only counts pairs whose tokens both carry a USD price.
    A pair's previous contribution is taken out of the token and factory
    totals before the new one is put in; the token side is only taken out when
    it was put in, i.e. when both previous per-side USD valuations were positive.
    """

    def __init__(self, store: EntityStore, oracle: PriceOracle,
                 factory_address: EvmAddress, bundle_id: str):
        super().__init__(store, factory_address, bundle_id)
        self.oracle = oracle

    def handle_sync(self, event: SyncEvent) -> HandlerResult:
        pair = self.store.load(Pair, event.pair)
        if pair is None:
            return self._missing("Pair", event.pair, event)

        token0 = self.store.load(Token, pair.token0)
        if token0 is None:
            return self._missing("Token", pair.token0, event)

        token1 = self.store.load(Token, pair.token1)
        if token1 is None:
            return self._missing("Token", pair.token1, event)

        factory = self.store.load(Factory, self.factory_address)
        if factory is None:
            return self._missing("Factory", self.factory_address, event)

        bundle = self.store.load(Bundle, self.bundle_id)
        if bundle is None:
            return self._missing("Bundle", self.bundle_id, event)

        bnb_price = self.oracle.get_bnb_price_in_usd()
        bundle.bnb_price = bnb_price
        self.store.save(bundle)

        # take out the pair's previous contribution
        factory.total_liquidity_usd -= pair.tracked_reserve_usd
        factory.total_liquidity_bnb -= pair.tracked_reserve_bnb

        token0.total_liquidity -= pair.reserve0
        token1.total_liquidity -= pair.reserve1

        if pair.reserve0_liquidity_usd > ZERO_BD and pair.reserve1_liquidity_usd > ZERO_BD:
            token0.tracked_total_liquidity -= pair.reserve0
            token0.tracked_total_liquidity_usd -= pair.reserve0_liquidity_usd
            token1.tracked_total_liquidity -= pair.reserve1
            token1.tracked_total_liquidity_usd -= pair.reserve1_liquidity_usd

        reserve0 = convert_token_to_decimal(event.reserve0, token0.decimals)
        reserve1 = convert_token_to_decimal(event.reserve1, token1.decimals)
        pair.reserve0 = reserve0
        pair.reserve1 = reserve1

        token0.total_liquidity += reserve0
        token1.total_liquidity += reserve1

        pair.token0_price = safe_div(reserve0, reserve1)
        pair.token1_price = safe_div(reserve1, reserve0)

        prices = self.oracle.derive_usd_price(reserve0, reserve1, token0, token1)
        token0_usd = prices.token0_price_usd
        token1_usd = prices.token1_price_usd
        token0_bnb = safe_div(token0_usd, bnb_price)
        token1_bnb = safe_div(token1_usd, bnb_price)

        if token0_usd > ZERO_BD and token1_usd > ZERO_BD:
            pair.reserve0_liquidity_usd = reserve0 * token0_usd
            pair.reserve1_liquidity_usd = reserve1 * token1_usd

            token0.tracked_total_liquidity += reserve0
            token0.tracked_total_liquidity_usd += pair.reserve0_liquidity_usd
            token1.tracked_total_liquidity += reserve1
            token1.tracked_total_liquidity_usd += pair.reserve1_liquidity_usd

            token0.derived_usd = token0_usd
            token0.derived_bnb = token0_bnb
            token1.derived_usd = token1_usd
            token1.derived_bnb = token1_bnb

            self.log_info("Pair priced",
                          pair=pair.id,
                          token0_price_usd=str(token0_usd),
                          token1_price_usd=str(token1_usd))
        else:
            pair.reserve0_liquidity_usd = ZERO_BD
            pair.reserve1_liquidity_usd = ZERO_BD

            self.log_debug("Pair left unpriced",
                           pair=pair.id,
                           token0_price_usd=str(token0_usd),
                           token1_price_usd=str(token1_usd))

        tracked_liquidity_usd = self.oracle.get_tracked_liquidity_usd(
            reserve0, token0, reserve1, token1)
        tracked_liquidity_bnb = safe_div(tracked_liquidity_usd, bnb_price)

        pair.tracked_reserve_usd = tracked_liquidity_usd
        pair.tracked_reserve_bnb = tracked_liquidity_bnb
        pair.reserve_usd = reserve0 * token0_usd + reserve1 * token1_usd
        pair.reserve_bnb = reserve0 * token0_bnb + reserve1 * token1_bnb

        factory.total_liquidity_usd += tracked_liquidity_usd
        factory.total_liquidity_bnb += tracked_liquidity_bnb

        self.store.save(token0)
        self.store.save(token1)
        self.store.save(pair)
        self.store.save(factory)

        return self._ok(event)
