# pair_indexer/core/config.py

import os
from pathlib import Path
from typing import List, Optional, Union

import msgspec
from msgspec import Struct, field

from .logging import IndexerLogger, log_with_context, INFO, ERROR
from ..types import (
    DEFAULT_BUNDLE_ID,
    DatabaseConfig,
    PricingConfig,
    EvmAddress,
    to_address,
)


def _split_addresses(raw: Optional[str]) -> List[EvmAddress]:
    if not raw:
        return []
    return [to_address(part.strip()) for part in raw.split(",") if part.strip()]


class IndexerConfig(Struct):
    factory_address: EvmAddress
    database: DatabaseConfig
    bundle_id: str = DEFAULT_BUNDLE_ID
    pricing: PricingConfig = field(default_factory=PricingConfig)

    def __post_init__(self):
        self.factory_address = to_address(self.factory_address)
        pricing = self.pricing
        if pricing.reference_pair:
            pricing.reference_pair = to_address(pricing.reference_pair)
        if pricing.reference_token:
            pricing.reference_token = to_address(pricing.reference_token)
        pricing.stablecoins = [to_address(a) for a in pricing.stablecoins]
        pricing.whitelist = [to_address(a) for a in pricing.whitelist]

    @classmethod
    def from_env(cls, env_vars: dict = None, env_file: Optional[Path] = None, **overrides) -> 'IndexerConfig':
        logger = IndexerLogger.get_logger('core.config')

        if env_vars is None:
            from dotenv import load_dotenv
            load_dotenv(env_file)
        env = env_vars if env_vars is not None else os.environ

        db_url = env.get("PAIR_INDEXER_DB_URL")
        if not db_url:
            log_with_context(logger, ERROR, "Database URL not configured")
            raise ValueError("PAIR_INDEXER_DB_URL environment variable is required")

        factory_address = env.get("PAIR_INDEXER_FACTORY_ADDRESS")
        if not factory_address:
            log_with_context(logger, ERROR, "Factory address not configured")
            raise ValueError("PAIR_INDEXER_FACTORY_ADDRESS environment variable is required")

        database = DatabaseConfig(
            url=db_url,
            pool_size=int(env.get("PAIR_INDEXER_DB_POOL_SIZE", 5)),
            max_overflow=int(env.get("PAIR_INDEXER_DB_MAX_OVERFLOW", 10)),
        )
        pricing = PricingConfig(
            reference_pair=env.get("PAIR_INDEXER_REFERENCE_PAIR") or None,
            reference_token=env.get("PAIR_INDEXER_REFERENCE_TOKEN") or None,
            stablecoins=_split_addresses(env.get("PAIR_INDEXER_STABLECOINS")),
            whitelist=_split_addresses(env.get("PAIR_INDEXER_WHITELIST")),
        )

        config = cls(
            factory_address=overrides.get("factory_address", factory_address),
            database=overrides.get("database", database),
            bundle_id=overrides.get("bundle_id", env.get("PAIR_INDEXER_BUNDLE_ID", DEFAULT_BUNDLE_ID)),
            pricing=overrides.get("pricing", pricing),
        )

        log_with_context(logger, INFO, "Configuration loaded from environment",
                        factory_address=config.factory_address,
                        bundle_id=config.bundle_id,
                        stablecoin_count=len(config.pricing.stablecoins),
                        whitelist_count=len(config.pricing.whitelist))
        return config

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'IndexerConfig':
        logger = IndexerLogger.get_logger('core.config')
        path = Path(path)

        try:
            config = msgspec.json.decode(path.read_bytes(), type=cls)
        except msgspec.DecodeError as e:
            log_with_context(logger, ERROR, "Malformed configuration file",
                            path=str(path),
                            error=str(e))
            raise ValueError(f"Invalid configuration file {path}: {e}") from e

        log_with_context(logger, INFO, "Configuration loaded from file",
                        path=str(path),
                        factory_address=config.factory_address)
        return config
