# pair_indexer/transform/periods.py

from msgspec import Struct

from ..core.logging import LoggingMixin
from ..database.store import EntityStore
from ..database.types import PeriodType
from ..types import (
    Factory,
    Pair,
    Token,
    PairHourData,
    PairDayData,
    TokenDayData,
    FactoryDayData,
)


class PeriodBuckets(Struct):
    pair_day: PairDayData
    pair_hour: PairHourData
    factory_day: FactoryDayData
    token0_day: TokenDayData
    token1_day: TokenDayData


class PeriodAggregator(LoggingMixin):
    """
    Maintains hourly and daily rollups.

    A bucket is created on the first event of its period and refreshed from the
    owning entity on every later event of that period. Volume deltas are added
    by the calling handler after the refresh.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def record_activity(self, timestamp: int, pair: Pair, factory: Factory,
                        token0: Token, token1: Token) -> PeriodBuckets:
        return PeriodBuckets(
            pair_day=self.update_pair_day_data(pair, timestamp),
            pair_hour=self.update_pair_hour_data(pair, timestamp),
            factory_day=self.update_factory_day_data(factory, timestamp),
            token0_day=self.update_token_day_data(token0, timestamp),
            token1_day=self.update_token_day_data(token1, timestamp),
        )

    def save(self, buckets: PeriodBuckets) -> None:
        for bucket in (buckets.pair_day, buckets.pair_hour, buckets.factory_day,
                       buckets.token0_day, buckets.token1_day):
            self.store.save(bucket)

    def update_factory_day_data(self, factory: Factory, timestamp: int) -> FactoryDayData:
        day_id = PeriodType.ONE_DAY.period_index(timestamp)

        factory_day = self.store.load(FactoryDayData, str(day_id))
        if factory_day is None:
            factory_day = FactoryDayData(
                id=str(day_id),
                date=PeriodType.ONE_DAY.period_start(timestamp),
            )
            self.log_debug("Factory day bucket created", entity_key=factory_day.id)

        factory_day.total_liquidity_usd = factory.total_liquidity_usd
        factory_day.total_liquidity_bnb = factory.total_liquidity_bnb
        factory_day.total_transactions = factory.total_transactions
        factory_day.daily_transactions += 1
        self.store.save(factory_day)

        return factory_day

    def update_pair_day_data(self, pair: Pair, timestamp: int) -> PairDayData:
        day_id = PeriodType.ONE_DAY.period_index(timestamp)
        day_pair_id = f"{pair.id}-{day_id}"

        pair_day = self.store.load(PairDayData, day_pair_id)
        if pair_day is None:
            pair_day = PairDayData(
                id=day_pair_id,
                date=PeriodType.ONE_DAY.period_start(timestamp),
                pair_address=pair.id,
                token0=pair.token0,
                token1=pair.token1,
            )
            self.log_debug("Pair day bucket created", entity_key=day_pair_id, pair=pair.id)

        pair_day.reserve0 = pair.reserve0
        pair_day.reserve1 = pair.reserve1
        pair_day.total_supply = pair.total_supply
        pair_day.reserve_usd = pair.reserve0_liquidity_usd + pair.reserve1_liquidity_usd
        pair_day.daily_txns += 1
        self.store.save(pair_day)

        return pair_day

    def update_pair_hour_data(self, pair: Pair, timestamp: int) -> PairHourData:
        hour_index = PeriodType.ONE_HOUR.period_index(timestamp)
        hour_pair_id = f"{pair.id}-{hour_index}"

        pair_hour = self.store.load(PairHourData, hour_pair_id)
        if pair_hour is None:
            pair_hour = PairHourData(
                id=hour_pair_id,
                hour_start_unix=PeriodType.ONE_HOUR.period_start(timestamp),
                pair=pair.id,
            )
            self.log_debug("Pair hour bucket created", entity_key=hour_pair_id, pair=pair.id)

        pair_hour.reserve0 = pair.reserve0
        pair_hour.reserve1 = pair.reserve1
        pair_hour.total_supply = pair.total_supply
        pair_hour.reserve_usd = pair.reserve0_liquidity_usd + pair.reserve1_liquidity_usd
        pair_hour.hourly_txns += 1
        self.store.save(pair_hour)

        return pair_hour

    def update_token_day_data(self, token: Token, timestamp: int) -> TokenDayData:
        day_id = PeriodType.ONE_DAY.period_index(timestamp)
        token_day_id = f"{token.id}-{day_id}"

        token_day = self.store.load(TokenDayData, token_day_id)
        if token_day is None:
            token_day = TokenDayData(
                id=token_day_id,
                date=PeriodType.ONE_DAY.period_start(timestamp),
                token=token.id,
            )
            self.log_debug("Token day bucket created", entity_key=token_day_id)

        # TODO: a volume-weighted price would describe the day better than the last one
        token_day.price_usd = token.derived_usd
        token_day.total_liquidity_token = token.total_liquidity
        token_day.total_liquidity_usd = token.tracked_total_liquidity_usd
        token_day.daily_txns += 1
        self.store.save(token_day)

        return token_day
