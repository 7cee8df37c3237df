# pair_indexer/types/periods.py

from decimal import Decimal

from .new import EvmAddress
from .entities import Entity
from .constants import ZERO_BD


class PairHourData(Entity):
    hour_start_unix: int
    pair: EvmAddress
    reserve0: Decimal = ZERO_BD
    reserve1: Decimal = ZERO_BD
    reserve_usd: Decimal = ZERO_BD
    total_supply: Decimal = ZERO_BD
    hourly_volume_token0: Decimal = ZERO_BD
    hourly_volume_token1: Decimal = ZERO_BD
    hourly_volume_usd: Decimal = ZERO_BD
    hourly_txns: int = 0


class PairDayData(Entity):
    date: int
    pair_address: EvmAddress
    token0: EvmAddress
    token1: EvmAddress
    reserve0: Decimal = ZERO_BD
    reserve1: Decimal = ZERO_BD
    reserve_usd: Decimal = ZERO_BD
    total_supply: Decimal = ZERO_BD
    daily_volume_token0: Decimal = ZERO_BD
    daily_volume_token1: Decimal = ZERO_BD
    daily_volume_usd: Decimal = ZERO_BD
    daily_txns: int = 0


class TokenDayData(Entity):
    date: int
    token: EvmAddress
    price_usd: Decimal = ZERO_BD
    total_liquidity_token: Decimal = ZERO_BD
    total_liquidity_usd: Decimal = ZERO_BD
    daily_volume_token: Decimal = ZERO_BD
    daily_volume_usd: Decimal = ZERO_BD
    daily_txns: int = 0


class FactoryDayData(Entity):
    date: int
    total_liquidity_usd: Decimal = ZERO_BD
    total_liquidity_bnb: Decimal = ZERO_BD
    total_volume_usd: Decimal = ZERO_BD
    daily_volume_usd: Decimal = ZERO_BD
    total_transactions: int = 0
    daily_transactions: int = 0
