# pair_indexer/database/tables/entities.py

from sqlalchemy import Column, Integer, BigInteger, Boolean, String, JSON, Index

from ..base import DBEntityModel
from ..types import EvmAddressType, EvmHashType, DecimalType
from ...types import Factory, Bundle, Token, Pair, Transaction, Mint, Burn, Swap


class DBFactory(DBEntityModel):
    __tablename__ = 'factories'
    struct_type = Factory

    id = Column(String(66), primary_key=True)
    pair_count = Column(Integer, nullable=False, default=0)
    total_liquidity_usd = Column(DecimalType, nullable=False)
    total_liquidity_bnb = Column(DecimalType, nullable=False)
    total_volume_usd = Column(DecimalType, nullable=False)
    total_transactions = Column(BigInteger, nullable=False, default=0)


class DBBundle(DBEntityModel):
    __tablename__ = 'bundles'
    struct_type = Bundle

    id = Column(String(16), primary_key=True)
    bnb_price = Column(DecimalType, nullable=False)


class DBToken(DBEntityModel):
    __tablename__ = 'tokens'
    struct_type = Token

    id = Column(String(42), primary_key=True)
    symbol = Column(String(64), nullable=False, default="")
    name = Column(String(256), nullable=False, default="")
    decimals = Column(Integer, nullable=False)
    total_liquidity = Column(DecimalType, nullable=False)
    tracked_total_liquidity = Column(DecimalType, nullable=False)
    tracked_total_liquidity_usd = Column(DecimalType, nullable=False)
    derived_usd = Column(DecimalType, nullable=False)
    derived_bnb = Column(DecimalType, nullable=False)
    trade_volume = Column(DecimalType, nullable=False)
    trade_volume_usd = Column(DecimalType, nullable=False)
    total_transactions = Column(BigInteger, nullable=False, default=0)


class DBPair(DBEntityModel):
    __tablename__ = 'pairs'
    struct_type = Pair

    id = Column(String(42), primary_key=True)
    token0 = Column(EvmAddressType, nullable=False, index=True)
    token1 = Column(EvmAddressType, nullable=False, index=True)
    reserve0 = Column(DecimalType, nullable=False)
    reserve1 = Column(DecimalType, nullable=False)
    total_supply = Column(DecimalType, nullable=False)
    token0_price = Column(DecimalType, nullable=False)
    token1_price = Column(DecimalType, nullable=False)
    reserve0_liquidity_usd = Column(DecimalType, nullable=False)
    reserve1_liquidity_usd = Column(DecimalType, nullable=False)
    reserve_usd = Column(DecimalType, nullable=False)
    reserve_bnb = Column(DecimalType, nullable=False)
    tracked_reserve_usd = Column(DecimalType, nullable=False)
    tracked_reserve_bnb = Column(DecimalType, nullable=False)
    volume_token0 = Column(DecimalType, nullable=False)
    volume_token1 = Column(DecimalType, nullable=False)
    volume_usd = Column(DecimalType, nullable=False)
    total_transactions = Column(BigInteger, nullable=False, default=0)
    created_at_timestamp = Column(Integer, nullable=False, default=0)
    created_at_block_number = Column(Integer, nullable=False, default=0)


class DBTransaction(DBEntityModel):
    __tablename__ = 'transactions'
    struct_type = Transaction

    id = Column(EvmHashType, primary_key=True)
    block_number = Column(Integer, nullable=False, index=True)
    timestamp = Column(Integer, nullable=False, index=True)
    mints = Column(JSON, nullable=False, default=list)
    burns = Column(JSON, nullable=False, default=list)
    swaps = Column(JSON, nullable=False, default=list)
    mint_count = Column(Integer, nullable=False, default=0)
    burn_count = Column(Integer, nullable=False, default=0)
    swap_count = Column(Integer, nullable=False, default=0)
    log_indexes = Column(JSON, nullable=False, default=list)


class DBMint(DBEntityModel):
    __tablename__ = 'mints'
    struct_type = Mint

    id = Column(String(80), primary_key=True)
    transaction = Column(EvmHashType, nullable=False)
    timestamp = Column(Integer, nullable=False)
    pair = Column(EvmAddressType, nullable=False)
    to = Column(EvmAddressType, nullable=False)
    liquidity = Column(DecimalType, nullable=False)
    sender = Column(EvmAddressType, nullable=True)
    amount0 = Column(DecimalType, nullable=True)
    amount1 = Column(DecimalType, nullable=True)
    amount_usd = Column(DecimalType, nullable=True)
    log_index = Column(Integer, nullable=True)

    __table_args__ = (
        Index('idx_mints_transaction', 'transaction'),
        Index('idx_mints_pair_timestamp', 'pair', 'timestamp'),
    )


class DBBurn(DBEntityModel):
    __tablename__ = 'burns'
    struct_type = Burn

    id = Column(String(80), primary_key=True)
    transaction = Column(EvmHashType, nullable=False)
    timestamp = Column(Integer, nullable=False)
    pair = Column(EvmAddressType, nullable=False)
    liquidity = Column(DecimalType, nullable=False)
    needs_complete = Column(Boolean, nullable=False)
    sender = Column(EvmAddressType, nullable=True)
    to = Column(EvmAddressType, nullable=True)
    fee_to = Column(EvmAddressType, nullable=True)
    fee_liquidity = Column(DecimalType, nullable=True)
    amount0 = Column(DecimalType, nullable=True)
    amount1 = Column(DecimalType, nullable=True)
    amount_usd = Column(DecimalType, nullable=True)
    log_index = Column(Integer, nullable=True)

    __table_args__ = (
        Index('idx_burns_transaction', 'transaction'),
        Index('idx_burns_pair_timestamp', 'pair', 'timestamp'),
    )


class DBSwap(DBEntityModel):
    __tablename__ = 'swaps'
    struct_type = Swap

    id = Column(String(80), primary_key=True)
    transaction = Column(EvmHashType, nullable=False)
    timestamp = Column(Integer, nullable=False)
    pair = Column(EvmAddressType, nullable=False)
    sender = Column(EvmAddressType, nullable=False)
    to = Column(EvmAddressType, nullable=False)
    from_ = Column(EvmAddressType, nullable=False)
    amount0_in = Column(DecimalType, nullable=False)
    amount1_in = Column(DecimalType, nullable=False)
    amount0_out = Column(DecimalType, nullable=False)
    amount1_out = Column(DecimalType, nullable=False)
    amount_usd = Column(DecimalType, nullable=False)
    log_index = Column(Integer, nullable=False)

    __table_args__ = (
        Index('idx_swaps_transaction', 'transaction'),
        Index('idx_swaps_pair_timestamp', 'pair', 'timestamp'),
    )
