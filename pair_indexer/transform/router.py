# pair_indexer/transform/router.py

from typing import Iterable, Optional

from .assembler import TransactionAssembler
from .periods import PeriodAggregator
from .reserves import ReserveUpdater
from .swaps import SwapRecorder
from ..core.logging import LoggingMixin
from ..database.store import EntityStore
from ..pricing.interfaces import PriceOracle
from ..types import (
    DEFAULT_BUNDLE_ID,
    EvmAddress,
    PairEvent,
    TransferEvent,
    MintEvent,
    BurnEvent,
    SwapEvent,
    SyncEvent,
    Transaction,
    HandlerResult,
    SkippedDuplicate,
    ProcessingStats,
)


class PairEventRouter(LoggingMixin):
    """
    Dispatches pair events to their handlers, one at a time.

    Events must arrive in ledger order (block number, then log index). Transfer,
    Mint, Burn and Swap events whose log index is already recorded on their
    transaction are skipped. Sync events carry no such key and must be
    delivered exactly once.
    """

    def __init__(self, store: EntityStore, oracle: PriceOracle, factory_address: EvmAddress,
                 bundle_id: str = DEFAULT_BUNDLE_ID):
        self.store = store
        self.aggregator = PeriodAggregator(store)
        self.assembler = TransactionAssembler(store, self.aggregator, factory_address, bundle_id)
        self.reserves = ReserveUpdater(store, oracle, factory_address, bundle_id)
        self.swaps = SwapRecorder(store, oracle, self.aggregator, factory_address, bundle_id)

        self.handler_map = {
            TransferEvent: self.assembler.handle_transfer,
            MintEvent: self.assembler.handle_mint,
            BurnEvent: self.assembler.handle_burn,
            SwapEvent: self.swaps.handle_swap,
            SyncEvent: self.reserves.handle_sync,
        }

        self.log_info("PairEventRouter initialized",
                      factory_address=factory_address,
                      bundle_id=bundle_id,
                      supported_events=[t.__name__ for t in self.handler_map])

    def process(self, event: PairEvent) -> HandlerResult:
        handler = self.handler_map.get(type(event))
        if handler is None:
            raise TypeError(f"No handler registered for {type(event).__name__}")

        duplicate = self._check_duplicate(event)
        if duplicate is not None:
            return duplicate

        result = handler(event)

        self.log_debug("Event processed",
                       tx_hash=event.tx_hash,
                       block_number=event.block_number,
                       log_index=event.log_index,
                       pair=event.pair,
                       handler=result.handler,
                       status=result.status)
        return result

    def process_many(self, events: Iterable[PairEvent]) -> ProcessingStats:
        stats = ProcessingStats()
        for event in events:
            stats.record(self.process(event))

        self.log_info("Event batch processed", **stats.to_dict())
        return stats

    def _check_duplicate(self, event: PairEvent) -> Optional[HandlerResult]:
        if isinstance(event, SyncEvent):
            return None

        transaction = self.store.load(Transaction, event.tx_hash)
        if transaction is None or not transaction.has_applied(event.log_index):
            return None

        self.log_warning("Event already applied to transaction, skipping",
                         tx_hash=event.tx_hash,
                         log_index=event.log_index,
                         pair=event.pair,
                         event_name=event.event_name)
        return SkippedDuplicate(
            handler=self.__class__.__name__,
            log_index=event.log_index,
            tx_hash=event.tx_hash,
        )
