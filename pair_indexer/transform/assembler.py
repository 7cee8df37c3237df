# pair_indexer/transform/assembler.py
"""
Assembles liquidity-token Transfer events and the pair's Mint/Burn events into
logical Mint and Burn records.

Adding liquidity emits a Transfer from the zero address followed by the pair's
Mint event. Removing liquidity emits a Transfer of liquidity tokens to the pair,
a Transfer from the pair to the zero address, and the pair's Burn event. When
the protocol fee is on, a Transfer from the zero address to the fee recipient
rides along with the burn; it is folded into the Burn record instead of
standing as a Mint of its own.
"""
from decimal import Decimal
from typing import Optional

from .base import PairHandler
from .periods import PeriodAggregator
from ..database.store import EntityStore
from ..types import (
    ZERO_ADDRESS,
    MINIMUM_LIQUIDITY,
    LIQUIDITY_TOKEN_DECIMALS,
    EvmAddress,
    TransferEvent,
    MintEvent,
    BurnEvent,
    Factory,
    Pair,
    Token,
    Transaction,
    Mint,
    Burn,
    HandlerResult,
    SkippedBootstrap,
)
from ..utils.amounts import convert_token_to_decimal


class TransactionAssembler(PairHandler):
    def __init__(self, store: EntityStore, aggregator: PeriodAggregator,
                 factory_address: EvmAddress, bundle_id: str):
        super().__init__(store, factory_address, bundle_id)
        self.aggregator = aggregator

    # === Transfer ===

    def handle_transfer(self, event: TransferEvent) -> HandlerResult:
        if event.to == ZERO_ADDRESS and event.value == MINIMUM_LIQUIDITY:
            self.log_debug("Skipping minimum liquidity lock transfer",
                           tx_hash=event.tx_hash,
                           pair=event.pair,
                           log_index=event.log_index)
            return SkippedBootstrap(handler=self.name, log_index=event.log_index)

        pair = self.store.load(Pair, event.pair)
        if pair is None:
            return self._missing("Pair", event.pair, event)

        value = convert_token_to_decimal(event.value, LIQUIDITY_TOKEN_DECIMALS)
        transaction = self._load_or_create_transaction(event)

        if event.from_ == ZERO_ADDRESS:
            pair.total_supply += value
            self._open_mint(transaction, pair, event, value)

        # liquidity tokens handed to the pair ahead of a burn
        if event.to == pair.id:
            self._open_burn(transaction, pair, event, value)

        if event.to == ZERO_ADDRESS and event.from_ == pair.id:
            pair.total_supply -= value
            self._close_burn(transaction, pair, event, value)

        transaction.mark_applied(event.log_index)
        self.store.save(pair)
        self.store.save(transaction)

        return self._ok(event)

    def _pending_mint(self, transaction: Transaction) -> Optional[Mint]:
        mint_id = transaction.last_mint
        if mint_id is None:
            return None
        mint = self.store.load(Mint, mint_id)
        if mint is None or mint.is_complete:
            return None
        return mint

    def _pending_burn(self, transaction: Transaction) -> Optional[Burn]:
        burn_id = transaction.last_burn
        if burn_id is None:
            return None
        burn = self.store.load(Burn, burn_id)
        if burn is None or not burn.needs_complete:
            return None
        return burn

    def _open_mint(self, transaction: Transaction, pair: Pair,
                   event: TransferEvent, value: Decimal) -> None:
        if self._pending_mint(transaction) is not None:
            self.log_debug("Previous mint still awaiting its Mint event, no new mint opened",
                           tx_hash=transaction.id,
                           log_index=event.log_index)
            return

        mint = Mint(
            id=transaction.next_mint_id(),
            transaction=transaction.id,
            timestamp=transaction.timestamp,
            pair=pair.id,
            to=event.to,
            liquidity=value,
        )
        self.store.save(mint)
        transaction.append_mint(mint.id)

        self.log_debug("Mint opened",
                       entity_key=mint.id,
                       tx_hash=transaction.id,
                       pair=pair.id)

    def _open_burn(self, transaction: Transaction, pair: Pair,
                   event: TransferEvent, value: Decimal) -> None:
        burn = Burn(
            id=transaction.next_burn_id(),
            transaction=transaction.id,
            timestamp=transaction.timestamp,
            pair=pair.id,
            liquidity=value,
            needs_complete=True,
            sender=event.from_,
            to=event.to,
        )
        self.store.save(burn)
        transaction.append_burn(burn.id)

        self.log_debug("Burn opened",
                       entity_key=burn.id,
                       tx_hash=transaction.id,
                       pair=pair.id)

    def _close_burn(self, transaction: Transaction, pair: Pair,
                    event: TransferEvent, value: Decimal) -> None:
        burn = self._pending_burn(transaction)
        reused = burn is not None
        if reused:
            burn.needs_complete = False
        else:
            burn = Burn(
                id=transaction.next_burn_id(),
                transaction=transaction.id,
                timestamp=transaction.timestamp,
                pair=pair.id,
                liquidity=value,
                needs_complete=False,
            )

        # an open mint at this point is the protocol fee mint of this burn
        fee_mint = self._pending_mint(transaction)
        if fee_mint is not None:
            burn.fee_to = fee_mint.to
            burn.fee_liquidity = fee_mint.liquidity
            self.store.remove(Mint, fee_mint.id)
            transaction.remove_last_mint()

            self.log_debug("Fee mint folded into burn",
                           entity_key=burn.id,
                           fee_mint=fee_mint.id,
                           fee_to=fee_mint.to,
                           tx_hash=transaction.id)

        self.store.save(burn)
        if not reused:
            transaction.append_burn(burn.id)

    # === Mint / Burn ===

    def handle_mint(self, event: MintEvent) -> HandlerResult:
        transaction = self.store.load(Transaction, event.tx_hash)
        if transaction is None:
            return self._missing("Transaction", event.tx_hash, event)

        mint_id = transaction.last_mint
        if mint_id is None:
            return self._missing("Mint", event.tx_hash, event)
        mint = self.store.load(Mint, mint_id)
        if mint is None:
            return self._missing("Mint", mint_id, event)

        loaded = self._load_pair_entities(event)
        if isinstance(loaded, HandlerResult):
            return loaded
        pair, factory, token0, token1 = loaded

        amount0, amount1, amount_usd = self._count_liquidity_event(
            event.amount0, event.amount1, pair, factory, token0, token1)

        mint.sender = event.sender
        mint.amount0 = amount0
        mint.amount1 = amount1
        mint.log_index = event.log_index
        mint.amount_usd = amount_usd
        self.store.save(mint)

        transaction.mark_applied(event.log_index)
        self.store.save(transaction)

        self.aggregator.record_activity(event.timestamp, pair, factory, token0, token1)

        self.log_debug("Mint completed",
                       entity_key=mint.id,
                       tx_hash=event.tx_hash,
                       pair=pair.id,
                       amount_usd=str(amount_usd))
        return self._ok(event)

    def handle_burn(self, event: BurnEvent) -> HandlerResult:
        transaction = self.store.load(Transaction, event.tx_hash)
        if transaction is None:
            return self._missing("Transaction", event.tx_hash, event)

        burn_id = transaction.last_burn
        if burn_id is None:
            return self._missing("Burn", event.tx_hash, event)
        burn = self.store.load(Burn, burn_id)
        if burn is None:
            return self._missing("Burn", burn_id, event)

        loaded = self._load_pair_entities(event)
        if isinstance(loaded, HandlerResult):
            return loaded
        pair, factory, token0, token1 = loaded

        amount0, amount1, amount_usd = self._count_liquidity_event(
            event.amount0, event.amount1, pair, factory, token0, token1)

        burn.amount0 = amount0
        burn.amount1 = amount1
        burn.log_index = event.log_index
        burn.amount_usd = amount_usd
        burn.needs_complete = False
        self.store.save(burn)

        transaction.mark_applied(event.log_index)
        self.store.save(transaction)

        self.aggregator.record_activity(event.timestamp, pair, factory, token0, token1)

        self.log_debug("Burn completed",
                       entity_key=burn.id,
                       tx_hash=event.tx_hash,
                       pair=pair.id,
                       amount_usd=str(amount_usd))
        return self._ok(event)

    def _load_pair_entities(self, event):
        pair = self.store.load(Pair, event.pair)
        if pair is None:
            return self._missing("Pair", event.pair, event)

        factory = self.store.load(Factory, self.factory_address)
        if factory is None:
            return self._missing("Factory", self.factory_address, event)

        token0 = self.store.load(Token, pair.token0)
        if token0 is None:
            return self._missing("Token", pair.token0, event)

        token1 = self.store.load(Token, pair.token1)
        if token1 is None:
            return self._missing("Token", pair.token1, event)

        return pair, factory, token0, token1

    def _count_liquidity_event(self, raw_amount0: int, raw_amount1: int, pair: Pair,
                               factory: Factory, token0: Token, token1: Token):
        """Bump transaction counters and value the deposited or withdrawn amounts"""
        amount0 = convert_token_to_decimal(raw_amount0, token0.decimals)
        amount1 = convert_token_to_decimal(raw_amount1, token1.decimals)

        token0.total_transactions += 1
        token1.total_transactions += 1
        pair.total_transactions += 1
        factory.total_transactions += 1

        amount_usd = token0.derived_usd * amount0 + token1.derived_usd * amount1

        # reserves are left to the Sync event
        self.store.save(token0)
        self.store.save(token1)
        self.store.save(pair)
        self.store.save(factory)

        return amount0, amount1, amount_usd
