# pair_indexer/__init__.py

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .core.container import IndexerContainer
from .core.config import IndexerConfig
from .core.logging import IndexerLogger, log_with_context
from .database.connection import DatabaseManager
from .database.store import EntityStore
from .database.repository import SqlEntityStore
from .pricing.interfaces import PriceOracle
from .pricing.oracle import StorePriceOracle
from .transform.router import PairEventRouter


def create_indexer(env_vars: dict = None, env_file: Optional[Path] = None,
                   config: Optional[IndexerConfig] = None, **overrides) -> IndexerContainer:
    if env_vars is None:
        load_dotenv(env_file)
    env = env_vars if env_vars is not None else os.environ
    _configure_logging_early(env)

    logger = IndexerLogger.get_logger('core.init')

    if config is None:
        config = IndexerConfig.from_env(env_vars, env_file=env_file, **overrides)

    container = IndexerContainer(config)
    _register_services(container)

    log_with_context(logger, logging.INFO, "Indexer created successfully",
                    factory_address=config.factory_address,
                    bundle_id=config.bundle_id)
    return container


def _configure_logging_early(env: dict):
    log_dir_env = env.get("PAIR_INDEXER_LOG_DIR")
    if log_dir_env:
        log_dir = Path(log_dir_env)
    else:
        log_dir = Path.cwd() / "logs"

    log_level = env.get("PAIR_INDEXER_LOG_LEVEL", "INFO")
    console_enabled = env.get("PAIR_INDEXER_LOG_CONSOLE", "true").lower() == "true"
    file_enabled = env.get("PAIR_INDEXER_LOG_FILE", "false").lower() == "true"
    structured_format = env.get("PAIR_INDEXER_LOG_STRUCTURED", "false").lower() == "true"

    IndexerLogger.configure(
        log_dir=log_dir,
        log_level=log_level,
        console_enabled=console_enabled,
        file_enabled=file_enabled,
        structured_format=structured_format
    )


def _register_services(container: IndexerContainer):
    container.register_factory(DatabaseManager, _create_database_manager)
    container.register_factory(EntityStore, lambda c: SqlEntityStore(c.get(DatabaseManager)))
    container.register_factory(PriceOracle, lambda c: StorePriceOracle(c.get(EntityStore), c.config.pricing))
    container.register_factory(PairEventRouter, _create_router)


def _create_database_manager(container: IndexerContainer) -> DatabaseManager:
    db_manager = DatabaseManager(container.config.database)
    db_manager.initialize()
    return db_manager


def _create_router(container: IndexerContainer) -> PairEventRouter:
    config = container.config
    return PairEventRouter(
        store=container.get(EntityStore),
        oracle=container.get(PriceOracle),
        factory_address=config.factory_address,
        bundle_id=config.bundle_id,
    )


__all__ = [
    'create_indexer',
    'IndexerContainer',
    'IndexerConfig',
]
