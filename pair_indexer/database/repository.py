# pair_indexer/database/repository.py

from typing import List, Optional, Type

from .connection import DatabaseManager
from .store import EntityStore, E
from .tables import ENTITY_TABLES
from ..core.logging import IndexerLogger, log_with_context, DEBUG, ERROR
from ..types import Entity


class SqlEntityStore(EntityStore):
    """Entity store backed by SQLAlchemy; every call runs in its own short transaction"""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self.logger = IndexerLogger.get_logger('database.repository.entity_store')

    def _table_for(self, entity_type: Type[Entity]):
        table = ENTITY_TABLES.get(entity_type)
        if table is None:
            raise TypeError(f"No table registered for entity type {entity_type.__name__}")
        return table

    def load(self, entity_type: Type[E], key: str) -> Optional[E]:
        table = self._table_for(entity_type)
        try:
            with self.db_manager.get_session() as session:
                row = session.get(table, key)
                return row.to_msgspec() if row is not None else None
        except Exception as e:
            log_with_context(self.logger, ERROR, "Error loading entity",
                            entity_kind=entity_type.kind(),
                            entity_key=key,
                            error=str(e))
            raise

    def save(self, entity: Entity) -> None:
        table = self._table_for(type(entity))
        try:
            with self.db_manager.get_transaction() as session:
                session.merge(table.from_msgspec(entity))
        except Exception as e:
            log_with_context(self.logger, ERROR, "Error saving entity",
                            entity_kind=entity.kind(),
                            entity_key=entity.id,
                            error=str(e))
            raise

        log_with_context(self.logger, DEBUG, "Entity saved",
                        entity_kind=entity.kind(),
                        entity_key=entity.id)

    def remove(self, entity_type: Type[Entity], key: str) -> bool:
        table = self._table_for(entity_type)
        try:
            with self.db_manager.get_transaction() as session:
                row = session.get(table, key)
                if row is None:
                    return False
                session.delete(row)
                return True
        except Exception as e:
            log_with_context(self.logger, ERROR, "Error removing entity",
                            entity_kind=entity_type.kind(),
                            entity_key=key,
                            error=str(e))
            raise

    def list(self, entity_type: Type[E]) -> List[E]:
        table = self._table_for(entity_type)
        with self.db_manager.get_session() as session:
            rows = session.query(table).order_by(table.id).all()
            return [row.to_msgspec() for row in rows]
