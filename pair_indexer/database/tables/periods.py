# pair_indexer/database/tables/periods.py

from sqlalchemy import Column, Integer, BigInteger, String, Index

from ..base import DBEntityModel
from ..types import EvmAddressType, DecimalType
from ...types import PairHourData, PairDayData, TokenDayData, FactoryDayData


class DBPairHourData(DBEntityModel):
    __tablename__ = 'pair_hour_data'
    struct_type = PairHourData

    id = Column(String(64), primary_key=True)
    hour_start_unix = Column(Integer, nullable=False)
    pair = Column(EvmAddressType, nullable=False)
    reserve0 = Column(DecimalType, nullable=False)
    reserve1 = Column(DecimalType, nullable=False)
    reserve_usd = Column(DecimalType, nullable=False)
    total_supply = Column(DecimalType, nullable=False)
    hourly_volume_token0 = Column(DecimalType, nullable=False)
    hourly_volume_token1 = Column(DecimalType, nullable=False)
    hourly_volume_usd = Column(DecimalType, nullable=False)
    hourly_txns = Column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        Index('idx_pair_hour_pair_start', 'pair', 'hour_start_unix'),
    )


class DBPairDayData(DBEntityModel):
    __tablename__ = 'pair_day_data'
    struct_type = PairDayData

    id = Column(String(64), primary_key=True)
    date = Column(Integer, nullable=False)
    pair_address = Column(EvmAddressType, nullable=False)
    token0 = Column(EvmAddressType, nullable=False)
    token1 = Column(EvmAddressType, nullable=False)
    reserve0 = Column(DecimalType, nullable=False)
    reserve1 = Column(DecimalType, nullable=False)
    reserve_usd = Column(DecimalType, nullable=False)
    total_supply = Column(DecimalType, nullable=False)
    daily_volume_token0 = Column(DecimalType, nullable=False)
    daily_volume_token1 = Column(DecimalType, nullable=False)
    daily_volume_usd = Column(DecimalType, nullable=False)
    daily_txns = Column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        Index('idx_pair_day_pair_date', 'pair_address', 'date'),
    )


class DBTokenDayData(DBEntityModel):
    __tablename__ = 'token_day_data'
    struct_type = TokenDayData

    id = Column(String(64), primary_key=True)
    date = Column(Integer, nullable=False)
    token = Column(EvmAddressType, nullable=False)
    price_usd = Column(DecimalType, nullable=False)
    total_liquidity_token = Column(DecimalType, nullable=False)
    total_liquidity_usd = Column(DecimalType, nullable=False)
    daily_volume_token = Column(DecimalType, nullable=False)
    daily_volume_usd = Column(DecimalType, nullable=False)
    daily_txns = Column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        Index('idx_token_day_token_date', 'token', 'date'),
    )


class DBFactoryDayData(DBEntityModel):
    __tablename__ = 'factory_day_data'
    struct_type = FactoryDayData

    id = Column(String(16), primary_key=True)
    date = Column(Integer, nullable=False, index=True)
    total_liquidity_usd = Column(DecimalType, nullable=False)
    total_liquidity_bnb = Column(DecimalType, nullable=False)
    total_volume_usd = Column(DecimalType, nullable=False)
    daily_volume_usd = Column(DecimalType, nullable=False)
    total_transactions = Column(BigInteger, nullable=False, default=0)
    daily_transactions = Column(BigInteger, nullable=False, default=0)
