# pair_indexer/pricing/oracle.py

from decimal import Decimal
from typing import Optional, Set

from .interfaces import PriceOracle, UsdPrices
from ..core.logging import LoggingMixin
from ..database.store import EntityStore
from ..types import Pair, Token, PricingConfig, EvmAddress, ZERO_BD, ONE_BD

TWO_BD = Decimal(2)


class StorePriceOracle(PriceOracle, LoggingMixin):
    """
    Prices tokens from pair reserves already held in the entity store.

    Pricing sources, in order of preference:
    - Stablecoins are worth one USD
    - The reference token is priced from the reference (reference/stable) pair
    - Other tokens are priced through the pair counterpart when it is a
      stablecoin, the reference token, or a whitelisted token with a USD price

    Only whitelisted tokens contribute to tracked volume and liquidity.
    """

    def __init__(self, store: EntityStore, config: PricingConfig):
        self.store = store
        self.reference_pair: Optional[EvmAddress] = config.reference_pair
        self.reference_token: Optional[EvmAddress] = config.reference_token
        self.stablecoins: Set[EvmAddress] = set(config.stablecoins)
        self.whitelist: Set[EvmAddress] = set(config.whitelist) | self.stablecoins
        if self.reference_token:
            self.whitelist.add(self.reference_token)

        self.log_info("StorePriceOracle initialized",
                      reference_pair=self.reference_pair,
                      reference_token=self.reference_token,
                      stablecoin_count=len(self.stablecoins),
                      whitelist_count=len(self.whitelist))

    def get_bnb_price_in_usd(self) -> Decimal:
        if not self.reference_pair or not self.reference_token:
            return ZERO_BD

        pair = self.store.load(Pair, self.reference_pair)
        if pair is None:
            self.log_debug("Reference pair not found, reference price unavailable",
                           pair=self.reference_pair)
            return ZERO_BD

        # token0_price is token0 per token1, token1_price is token1 per token0
        if pair.token0 == self.reference_token:
            return pair.token1_price
        if pair.token1 == self.reference_token:
            return pair.token0_price

        self.log_warning("Reference token is not part of the reference pair",
                         pair=self.reference_pair,
                         reference_token=self.reference_token)
        return ZERO_BD

    def derive_usd_price(self, reserve0: Decimal, reserve1: Decimal,
                         token0: Token, token1: Token) -> UsdPrices:
        return UsdPrices(
            token0_price_usd=self._price_against(token0, reserve0, token1, reserve1),
            token1_price_usd=self._price_against(token1, reserve1, token0, reserve0),
        )

    def _price_against(self, token: Token, own_reserve: Decimal,
                       other: Token, other_reserve: Decimal) -> Decimal:
        if token.id in self.stablecoins:
            return ONE_BD
        if token.id == self.reference_token:
            return self.get_bnb_price_in_usd()
        if own_reserve == ZERO_BD:
            return ZERO_BD

        ratio = other_reserve / own_reserve
        if other.id in self.stablecoins:
            return ratio
        if other.id == self.reference_token:
            return ratio * self.get_bnb_price_in_usd()
        if other.id in self.whitelist:
            return ratio * other.derived_usd
        return ZERO_BD

    def get_tracked_volume_usd(self, amount0: Decimal, token0: Token,
                               amount1: Decimal, token1: Token) -> Decimal:
        value0 = amount0 * token0.derived_usd
        value1 = amount1 * token1.derived_usd
        tracked0 = token0.id in self.whitelist
        tracked1 = token1.id in self.whitelist

        if tracked0 and tracked1:
            return (value0 + value1) / TWO_BD
        if tracked0:
            return value0
        if tracked1:
            return value1
        return ZERO_BD

    def get_tracked_liquidity_usd(self, reserve0: Decimal, token0: Token,
                                  reserve1: Decimal, token1: Token) -> Decimal:
        value0 = reserve0 * token0.derived_usd
        value1 = reserve1 * token1.derived_usd
        tracked0 = token0.id in self.whitelist
        tracked1 = token1.id in self.whitelist

        if tracked0 and tracked1:
            return value0 + value1
        if tracked0:
            return value0 * TWO_BD
        if tracked1:
            return value1 * TWO_BD
        return ZERO_BD
