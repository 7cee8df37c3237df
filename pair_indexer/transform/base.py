# pair_indexer/transform/base.py

from abc import ABC

from ..core.logging import LoggingMixin
from ..database.store import EntityStore
from ..types import (
    EvmAddress,
    PairEvent,
    Transaction,
    HandlerResult,
    Ok,
    SkippedMissingDependency,
)


class PairHandler(ABC, LoggingMixin):
    """
    Shared plumbing for the pair event handlers.

    The factory address and bundle id identify the two process-wide singletons;
    they are handed in explicitly rather than looked up from module state.
    """

    def __init__(self, store: EntityStore, factory_address: EvmAddress, bundle_id: str):
        if not factory_address:
            raise ValueError(f"{self.__class__.__name__} requires a factory address")

        self.store = store
        self.factory_address = factory_address
        self.bundle_id = bundle_id
        self.name = self.__class__.__name__

    def _ok(self, event: PairEvent) -> HandlerResult:
        return Ok(handler=self.name, log_index=event.log_index)

    def _missing(self, entity_kind: str, key: str, event: PairEvent) -> HandlerResult:
        self.log_debug(f"{event.event_name} event, but {entity_kind} doesn't exist",
                       entity_kind=entity_kind,
                       entity_key=key,
                       tx_hash=event.tx_hash,
                       pair=event.pair,
                       log_index=event.log_index,
                       handler=self.name)
        return SkippedMissingDependency(
            handler=self.name,
            log_index=event.log_index,
            entity_kind=entity_kind,
            key=key,
        )

    def _load_or_create_transaction(self, event: PairEvent) -> Transaction:
        transaction = self.store.load(Transaction, event.tx_hash)
        if transaction is None:
            transaction = Transaction(
                id=event.tx_hash,
                block_number=event.block_number,
                timestamp=event.timestamp,
            )
            self.log_debug("Transaction created",
                           tx_hash=event.tx_hash,
                           block_number=event.block_number)
        return transaction
