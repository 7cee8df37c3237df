# pair_indexer/pricing/interfaces.py
"""
Price oracle interface consumed by the sync and swap handlers.
"""
from abc import ABC, abstractmethod
from decimal import Decimal

from msgspec import Struct

from ..types import Token


class UsdPrices(Struct, frozen=True):
    token0_price_usd: Decimal
    token1_price_usd: Decimal


class PriceOracle(ABC):

    @abstractmethod
    def get_bnb_price_in_usd(self) -> Decimal:
        """USD value of one unit of the reference currency"""

    @abstractmethod
    def derive_usd_price(self, reserve0: Decimal, reserve1: Decimal,
                         token0: Token, token1: Token) -> UsdPrices:
        """
        Instantaneous USD price of both pair tokens.

        Args:
            reserve0: Decimal reserve of token0 after the sync
            reserve1: Decimal reserve of token1 after the sync
            token0: Token entity for token0
            token1: Token entity for token1

        Returns:
            UsdPrices, zero for a side that cannot be priced
        """

    @abstractmethod
    def get_tracked_volume_usd(self, amount0: Decimal, token0: Token,
                               amount1: Decimal, token1: Token) -> Decimal:
        """USD volume of a swap that may be counted in global totals"""

    @abstractmethod
    def get_tracked_liquidity_usd(self, reserve0: Decimal, token0: Token,
                                  reserve1: Decimal, token1: Token) -> Decimal:
        """USD liquidity of a pair that may be counted in global totals"""
