# pair_indexer/transform/swaps.py

from .base import PairHandler
from .periods import PeriodAggregator
from ..database.store import EntityStore
from ..pricing.interfaces import PriceOracle
from ..types import (
    EvmAddress,
    SwapEvent,
    Factory,
    Bundle,
    Pair,
    Token,
    Swap,
    HandlerResult,
)
from ..utils.amounts import convert_token_to_decimal


class SwapRecorder(PairHandler):
    def __init__(self, store: EntityStore, oracle: PriceOracle, aggregator: PeriodAggregator,
                 factory_address: EvmAddress, bundle_id: str):
        super().__init__(store, factory_address, bundle_id)
        self.oracle = oracle
        self.aggregator = aggregator

    def handle_swap(self, event: SwapEvent) -> HandlerResult:
        pair = self.store.load(Pair, event.pair)
        if pair is None:
            return self._missing("Pair", event.pair, event)

        token0 = self.store.load(Token, pair.token0)
        if token0 is None:
            return self._missing("Token", pair.token0, event)

        token1 = self.store.load(Token, pair.token1)
        if token1 is None:
            return self._missing("Token", pair.token1, event)

        if self.store.load(Bundle, self.bundle_id) is None:
            return self._missing("Bundle", self.bundle_id, event)

        factory = self.store.load(Factory, self.factory_address)
        if factory is None:
            return self._missing("Factory", self.factory_address, event)

        amount0_in = convert_token_to_decimal(event.amount0_in, token0.decimals)
        amount1_in = convert_token_to_decimal(event.amount1_in, token1.decimals)
        amount0_out = convert_token_to_decimal(event.amount0_out, token0.decimals)
        amount1_out = convert_token_to_decimal(event.amount1_out, token1.decimals)

        amount0_total = amount0_in + amount0_out
        amount1_total = amount1_in + amount1_out

        tracked_amount_usd = self.oracle.get_tracked_volume_usd(
            amount0_total, token0, amount1_total, token1)

        token0.trade_volume += amount0_total
        token0.trade_volume_usd += tracked_amount_usd
        token0.total_transactions += 1

        token1.trade_volume += amount1_total
        token1.trade_volume_usd += tracked_amount_usd
        token1.total_transactions += 1

        pair.volume_usd += tracked_amount_usd
        pair.volume_token0 += amount0_total
        pair.volume_token1 += amount1_total
        pair.total_transactions += 1

        factory.total_volume_usd += tracked_amount_usd
        factory.total_transactions += 1

        self.store.save(pair)
        self.store.save(token0)
        self.store.save(token1)
        self.store.save(factory)

        transaction = self._load_or_create_transaction(event)
        swap = Swap(
            id=transaction.next_swap_id(),
            transaction=transaction.id,
            timestamp=transaction.timestamp,
            pair=pair.id,
            sender=event.sender,
            to=event.to,
            from_=event.tx_from,
            amount0_in=amount0_in,
            amount1_in=amount1_in,
            amount0_out=amount0_out,
            amount1_out=amount1_out,
            amount_usd=tracked_amount_usd,
            log_index=event.log_index,
        )
        self.store.save(swap)

        transaction.append_swap(swap.id)
        transaction.mark_applied(event.log_index)
        self.store.save(transaction)

        buckets = self.aggregator.record_activity(event.timestamp, pair, factory, token0, token1)

        buckets.factory_day.daily_volume_usd += tracked_amount_usd
        buckets.factory_day.total_volume_usd = factory.total_volume_usd

        buckets.pair_day.daily_volume_token0 += amount0_total
        buckets.pair_day.daily_volume_token1 += amount1_total
        buckets.pair_day.daily_volume_usd += tracked_amount_usd

        buckets.pair_hour.hourly_volume_token0 += amount0_total
        buckets.pair_hour.hourly_volume_token1 += amount1_total
        buckets.pair_hour.hourly_volume_usd += tracked_amount_usd

        # token buckets value their own leg rather than the tracked trade value
        buckets.token0_day.daily_volume_token += amount0_total
        buckets.token0_day.daily_volume_usd += amount0_total * token0.derived_usd
        buckets.token1_day.daily_volume_token += amount1_total
        buckets.token1_day.daily_volume_usd += amount1_total * token1.derived_usd

        self.aggregator.save(buckets)

        self.log_debug("Swap recorded",
                       entity_key=swap.id,
                       tx_hash=event.tx_hash,
                       pair=pair.id,
                       amount_usd=str(tracked_amount_usd))
        return self._ok(event)
