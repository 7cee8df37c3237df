# pair_indexer/types/config.py

from typing import List, Optional

from msgspec import Struct, field

from .new import EvmAddress


class DatabaseConfig(Struct):
    url: str
    pool_size: int = 5
    max_overflow: int = 10


class PricingConfig(Struct):
    reference_pair: Optional[EvmAddress] = None
    reference_token: Optional[EvmAddress] = None
    stablecoins: List[EvmAddress] = field(default_factory=list)
    whitelist: List[EvmAddress] = field(default_factory=list)


class TokenSeed(Struct, kw_only=True):
    address: EvmAddress
    decimals: int
    symbol: str = ""
    name: str = ""


class PairSeed(Struct, kw_only=True):
    address: EvmAddress
    token0: EvmAddress
    token1: EvmAddress
    block_number: int = 0
    timestamp: int = 0


class SeedConfig(Struct):
    tokens: List[TokenSeed] = field(default_factory=list)
    pairs: List[PairSeed] = field(default_factory=list)
