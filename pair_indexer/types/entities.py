# pair_indexer/types/entities.py

from decimal import Decimal
from typing import List, Optional

from msgspec import Struct, field

from .new import EvmAddress, EvmHash, EntityId
from .constants import ZERO_BD


class Entity(Struct, kw_only=True):
    ''' Base class for every record kept in the entity store. '''
    id: EntityId

    @classmethod
    def kind(cls) -> str:
        return cls.__name__


class Factory(Entity):
    pair_count: int = 0
    total_liquidity_usd: Decimal = ZERO_BD
    total_liquidity_bnb: Decimal = ZERO_BD
    total_volume_usd: Decimal = ZERO_BD
    total_transactions: int = 0


class Bundle(Entity):
    bnb_price: Decimal = ZERO_BD


class Token(Entity):
    symbol: str = ""
    name: str = ""
    decimals: int = 18
    total_liquidity: Decimal = ZERO_BD
    # liquidity counted only from pairs whose two tokens are both priced
    tracked_total_liquidity: Decimal = ZERO_BD
    tracked_total_liquidity_usd: Decimal = ZERO_BD
    derived_usd: Decimal = ZERO_BD
    derived_bnb: Decimal = ZERO_BD
    trade_volume: Decimal = ZERO_BD
    trade_volume_usd: Decimal = ZERO_BD
    total_transactions: int = 0


class Pair(Entity):
    token0: EvmAddress
    token1: EvmAddress
    reserve0: Decimal = ZERO_BD
    reserve1: Decimal = ZERO_BD
    total_supply: Decimal = ZERO_BD
    token0_price: Decimal = ZERO_BD
    token1_price: Decimal = ZERO_BD
    reserve0_liquidity_usd: Decimal = ZERO_BD
    reserve1_liquidity_usd: Decimal = ZERO_BD
    reserve_usd: Decimal = ZERO_BD
    reserve_bnb: Decimal = ZERO_BD
    tracked_reserve_usd: Decimal = ZERO_BD
    tracked_reserve_bnb: Decimal = ZERO_BD
    volume_token0: Decimal = ZERO_BD
    volume_token1: Decimal = ZERO_BD
    volume_usd: Decimal = ZERO_BD
    total_transactions: int = 0
    created_at_timestamp: int = 0
    created_at_block_number: int = 0


class Transaction(Entity):
    block_number: int
    timestamp: int
    mints: List[EntityId] = field(default_factory=list)
    burns: List[EntityId] = field(default_factory=list)
    swaps: List[EntityId] = field(default_factory=list)
    # id allocation counters, never decremented
    mint_count: int = 0
    burn_count: int = 0
    swap_count: int = 0
    log_indexes: List[int] = field(default_factory=list)

    def _allocate(self, counter: str) -> EntityId:
        sequence = getattr(self, counter)
        setattr(self, counter, sequence + 1)
        return EntityId(f"{self.id}-{sequence}")

    def next_mint_id(self) -> EntityId:
        return self._allocate("mint_count")

    def next_burn_id(self) -> EntityId:
        return self._allocate("burn_count")

    def next_swap_id(self) -> EntityId:
        return self._allocate("swap_count")

    def append_mint(self, mint_id: EntityId) -> None:
        self.mints.append(mint_id)

    def append_burn(self, burn_id: EntityId) -> None:
        self.burns.append(burn_id)

    def append_swap(self, swap_id: EntityId) -> None:
        self.swaps.append(swap_id)

    def remove_last_mint(self) -> EntityId:
        return self.mints.pop()

    @property
    def last_mint(self) -> Optional[EntityId]:
        return self.mints[-1] if self.mints else None

    @property
    def last_burn(self) -> Optional[EntityId]:
        return self.burns[-1] if self.burns else None

    def has_applied(self, log_index: int) -> bool:
        return log_index in self.log_indexes

    def mark_applied(self, log_index: int) -> None:
        if log_index not in self.log_indexes:
            self.log_indexes.append(log_index)


class Mint(Entity):
    transaction: EvmHash
    timestamp: int
    pair: EvmAddress
    to: EvmAddress
    liquidity: Decimal
    sender: Optional[EvmAddress] = None
    amount0: Optional[Decimal] = None
    amount1: Optional[Decimal] = None
    amount_usd: Optional[Decimal] = None
    log_index: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.sender is not None


class Burn(Entity):
    transaction: EvmHash
    timestamp: int
    pair: EvmAddress
    liquidity: Decimal
    needs_complete: bool
    sender: Optional[EvmAddress] = None
    to: Optional[EvmAddress] = None
    fee_to: Optional[EvmAddress] = None
    fee_liquidity: Optional[Decimal] = None
    amount0: Optional[Decimal] = None
    amount1: Optional[Decimal] = None
    amount_usd: Optional[Decimal] = None
    log_index: Optional[int] = None


class Swap(Entity):
    transaction: EvmHash
    timestamp: int
    pair: EvmAddress
    sender: EvmAddress
    to: EvmAddress
    from_: EvmAddress = field(name="from")
    amount0_in: Decimal
    amount1_in: Decimal
    amount0_out: Decimal
    amount1_out: Decimal
    amount_usd: Decimal
    log_index: int
