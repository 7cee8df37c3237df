# pair_indexer/types/new.py

from typing import NewType

EvmAddress = NewType('EvmAddress', str)
EvmHash = NewType('EvmHash', str)
EntityId = NewType('EntityId', str)


def to_address(value: str) -> EvmAddress:
    return EvmAddress(value.lower())
