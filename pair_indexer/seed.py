# pair_indexer/seed.py
"""
Creates the records the event handlers expect to find: the factory, the price
bundle, the tokens and the pairs. Records already in the store are left as
they are, so a seed file can be re-applied safely.
"""
from pathlib import Path
from typing import Dict, Union

import msgspec

from .core.logging import IndexerLogger, log_with_context, INFO, DEBUG, ERROR
from .database.store import EntityStore
from .types import (
    EvmAddress,
    SeedConfig,
    Factory,
    Bundle,
    Token,
    Pair,
    to_address,
)


def load_seed_file(path: Union[str, Path]) -> SeedConfig:
    logger = IndexerLogger.get_logger('seed')
    path = Path(path)
    try:
        return msgspec.json.decode(path.read_bytes(), type=SeedConfig)
    except msgspec.DecodeError as e:
        log_with_context(logger, ERROR, "Malformed seed file", path=str(path), error=str(e))
        raise ValueError(f"Invalid seed file {path}: {e}") from e


def seed_entities(store: EntityStore, seed: SeedConfig, factory_address: EvmAddress,
                  bundle_id: str) -> Dict[str, int]:
    logger = IndexerLogger.get_logger('seed')
    created = {"factory": 0, "bundle": 0, "tokens": 0, "pairs": 0}

    factory_address = to_address(factory_address)
    factory = store.load(Factory, factory_address)
    if factory is None:
        factory = Factory(id=factory_address)
        created["factory"] = 1

    if store.load(Bundle, bundle_id) is None:
        store.save(Bundle(id=bundle_id))
        created["bundle"] = 1

    for token_seed in seed.tokens:
        address = to_address(token_seed.address)
        if store.load(Token, address) is not None:
            log_with_context(logger, DEBUG, "Token already exists", entity_key=address)
            continue
        store.save(Token(
            id=address,
            symbol=token_seed.symbol,
            name=token_seed.name,
            decimals=token_seed.decimals,
        ))
        created["tokens"] += 1

    for pair_seed in seed.pairs:
        address = to_address(pair_seed.address)
        if store.load(Pair, address) is not None:
            log_with_context(logger, DEBUG, "Pair already exists", pair=address)
            continue

        token0 = to_address(pair_seed.token0)
        token1 = to_address(pair_seed.token1)
        for token in (token0, token1):
            if store.load(Token, token) is None:
                raise ValueError(f"Pair {address} references unknown token {token}")

        store.save(Pair(
            id=address,
            token0=token0,
            token1=token1,
            created_at_timestamp=pair_seed.timestamp,
            created_at_block_number=pair_seed.block_number,
        ))
        factory.pair_count += 1
        created["pairs"] += 1

    store.save(factory)

    log_with_context(logger, INFO, "Seed applied",
                    factory_address=factory_address,
                    bundle_id=bundle_id,
                    **created)
    return created
