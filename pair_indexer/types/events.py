# pair_indexer/types/events.py

from typing import Union

import msgspec
from msgspec import Struct, field

from .new import EvmAddress, EvmHash


class PairEvent(Struct, tag_field="event", kw_only=True, rename="camel"):
    ''' Base class for events emitted by a pair contract. '''
    pair: EvmAddress
    tx_hash: EvmHash
    tx_from: EvmAddress
    block_number: int
    timestamp: int
    log_index: int

    @property
    def event_name(self) -> str:
        return self.__struct_config__.tag


class TransferEvent(PairEvent, tag="Transfer"):
    from_: EvmAddress = field(name="from")
    to: EvmAddress
    value: int


class MintEvent(PairEvent, tag="Mint"):
    sender: EvmAddress
    amount0: int
    amount1: int


class BurnEvent(PairEvent, tag="Burn"):
    amount0: int
    amount1: int


class SwapEvent(PairEvent, tag="Swap"):
    sender: EvmAddress
    to: EvmAddress
    amount0_in: int
    amount1_in: int
    amount0_out: int
    amount1_out: int


class SyncEvent(PairEvent, tag="Sync"):
    reserve0: int
    reserve1: int


LedgerEvent = Union[TransferEvent, MintEvent, BurnEvent, SwapEvent, SyncEvent]


def ordering_key(event: PairEvent) -> tuple:
    return (event.block_number, event.log_index)


_ADDRESS_FIELDS = ('pair', 'tx_hash', 'tx_from', 'from_', 'to', 'sender')


def normalize_event(event: PairEvent) -> PairEvent:
    ''' Lower-case every address and hash field of an event decoded from outside input. '''
    changes = {}
    for name in _ADDRESS_FIELDS:
        value = getattr(event, name, None)
        if isinstance(value, str):
            changes[name] = value.lower()
    return msgspec.structs.replace(event, **changes)
