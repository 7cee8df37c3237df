# pair_indexer/database/store.py
"""
Entity store interface.

The handlers only ever load a record by key, mutate it and save it back, or
remove it. There are no cross-key transactions: each call stands alone and the
last write for a key wins.
"""
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Dict, List, Optional, Tuple, Type, TypeVar

from ..types import Entity

E = TypeVar('E', bound=Entity)


class EntityStore(ABC):

    @abstractmethod
    def load(self, entity_type: Type[E], key: str) -> Optional[E]:
        """Return a detached copy of the stored record, or None"""

    @abstractmethod
    def save(self, entity: Entity) -> None:
        """Create or overwrite the record under entity.id"""

    @abstractmethod
    def remove(self, entity_type: Type[Entity], key: str) -> bool:
        """Delete the record; returns False when nothing was stored under key"""

    @abstractmethod
    def list(self, entity_type: Type[E]) -> List[E]:
        """All records of one kind, ordered by id"""


class InMemoryEntityStore(EntityStore):
    def __init__(self):
        self._records: Dict[Tuple[type, str], Entity] = {}

    def load(self, entity_type: Type[E], key: str) -> Optional[E]:
        record = self._records.get((entity_type, key))
        return deepcopy(record) if record is not None else None

    def save(self, entity: Entity) -> None:
        self._records[(type(entity), entity.id)] = deepcopy(entity)

    def remove(self, entity_type: Type[Entity], key: str) -> bool:
        return self._records.pop((entity_type, key), None) is not None

    def list(self, entity_type: Type[E]) -> List[E]:
        records = [deepcopy(record) for (kind, _), record in self._records.items() if kind is entity_type]
        return sorted(records, key=lambda record: record.id)

    def __len__(self) -> int:
        return len(self._records)
