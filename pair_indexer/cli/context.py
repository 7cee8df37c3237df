# pair_indexer/cli/context.py

"""
CLI context: builds the indexer container on first use so commands that fail
argument validation never touch the database.
"""

import logging
from pathlib import Path
from typing import Optional

from .. import create_indexer
from ..core.container import IndexerContainer
from ..core.logging import IndexerLogger, log_with_context
from ..database.connection import DatabaseManager
from ..database.store import EntityStore
from ..transform.router import PairEventRouter


class CLIContext:
    def __init__(self, env_file: Optional[Path] = None):
        self.logger = IndexerLogger.get_logger('cli.context')
        self.env_file = env_file
        self._container: Optional[IndexerContainer] = None

    @property
    def container(self) -> IndexerContainer:
        if self._container is None:
            self._container = create_indexer(env_file=self.env_file)
            log_with_context(self.logger, logging.DEBUG, "CLI container created",
                            env_file=str(self.env_file) if self.env_file else None)
        return self._container

    @property
    def config(self):
        return self.container.config

    @property
    def db_manager(self) -> DatabaseManager:
        return self.container.get(DatabaseManager)

    @property
    def store(self) -> EntityStore:
        return self.container.get(EntityStore)

    @property
    def router(self) -> PairEventRouter:
        return self.container.get(PairEventRouter)

    def close(self) -> None:
        if self._container is not None and self._container.is_created(DatabaseManager):
            self.db_manager.shutdown()
            self._container = None
